"""
结构化事件

集成器不直接输出任何内容，而是把警告和进度写入 EventLog，由调用方决定如何渲染。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Sequence, Tuple, Union


class Severity(str, Enum):
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """一条面向用户的诊断信息（目前只有 build setting 覆盖警告）"""
    message: str
    suggested_actions: Tuple[str, ...] = ()
    severity: Severity = Severity.WARNING
    target_name: str = ""
    setting_key: str = ""
    configurations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SectionEvent:
    """每次 integrate 调用产生一个 section"""
    product_name: str
    target_names: Tuple[str, ...]
    project_path: str

    @property
    def message(self) -> str:
        noun = pluralize('target', len(self.target_names))
        names = to_sentence([f"`{name}`" for name in self.target_names])
        return (
            f"Integrating `{self.product_name}` into {noun} {names} "
            f"of project {self.project_path}."
        )


@dataclass(frozen=True)
class StepEvent:
    """单个集成步骤完成"""
    step: str
    target_names: Tuple[str, ...] = ()


Event = Union[Diagnostic, SectionEvent, StepEvent]


def pluralize(word: str, count: int) -> str:
    return word if count == 1 else f"{word}s"


def to_sentence(items: Sequence[str]) -> str:
    """['a'] -> 'a'; ['a', 'b'] -> 'a and b'; ['a', 'b', 'c'] -> 'a, b, and c'"""
    items = list(items)
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


@dataclass
class EventLog:
    """按发生顺序收集事件，支持订阅以实时渲染"""
    events: List[Event] = field(default_factory=list)
    _listeners: List[Callable[[Event], None]] = field(default_factory=list, repr=False)

    def subscribe(self, listener: Callable[[Event], None]) -> None:
        self._listeners.append(listener)

    def emit(self, event: Event) -> None:
        self.events.append(event)
        for listener in self._listeners:
            listener(event)

    @property
    def warnings(self) -> List[Diagnostic]:
        return [
            e for e in self.events
            if isinstance(e, Diagnostic) and e.severity == Severity.WARNING
        ]

    @property
    def sections(self) -> List[SectionEvent]:
        return [e for e in self.events if isinstance(e, SectionEvent)]

    @property
    def steps(self) -> List[StepEvent]:
        return [e for e in self.events if isinstance(e, StepEvent)]
