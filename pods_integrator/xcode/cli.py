#!/usr/bin/env python3
"""
Pods 集成工具命令行入口

按配置文件中的顺序，把每个库集成到它的用户工程中。

Usage:
    pods-integrate <config.yaml> [options]

Options:
    --dry-run               执行所有集成步骤但不保存工程
    --verbose, -v           在终端输出日志
    --help, -h              显示帮助
"""
import argparse
import os
import sys
from typing import List, Optional

from ..core.config import ConfigLoader
from ..core.errors import Informative
from ..core.events import Diagnostic, EventLog, SectionEvent
from ..lib.logger import ENV_VERBOSE, cleanup_old_logs, get_logger
from .integrator import TargetIntegrator


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description='Pods 用户工程集成工具',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'config',
        help='集成配置文件路径 (YAML)'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='仅执行集成步骤，不保存工程'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='在终端输出日志'
    )

    return parser.parse_args(argv)


def render_event(event):
    """把结构化事件渲染到终端"""
    if isinstance(event, SectionEvent):
        print(event.message)
    elif isinstance(event, Diagnostic):
        print(f"[!] {event.message}")
        for action in event.suggested_actions:
            print(f"    - {action}")


def run(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        os.environ[ENV_VERBOSE] = '1'

    logger = get_logger("cli")
    logger.log_separator("Integration Session Start")
    logger.debug(f"Arguments: {vars(args)}")

    removed = cleanup_old_logs()
    if removed:
        logger.debug(f"Removed {removed} old log files")

    try:
        config = ConfigLoader(args.config).load()
    except Informative as e:
        logger.error(f"Failed to load config: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    dry_run = args.dry_run or config.dry_run
    if not config.libraries:
        print("配置中没有需要集成的库")
        logger.log_separator("Integration Session End")
        return 0

    events = EventLog()
    events.subscribe(render_event)

    integrated = 0
    for library in config.libraries:
        integrator = TargetIntegrator(
            library,
            events=events,
            dry_run=dry_run,
            validate_saved_project=config.validate_saved_project,
        )
        try:
            result = integrator.integrate()
        except (Informative, OSError) as e:
            logger.error(f"Integration of {library.label} failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            logger.log_separator("Integration Session End")
            return 1

        integrated += len(result.integrated_targets)
        if not result.integrated_targets:
            print(f"`{library.product_name}` 已集成，跳过")

    if dry_run:
        print(f"[DRY RUN] 不保存修改，共 {integrated} 个 Target 待集成")
    else:
        print(f"✓ 完成集成，共 {integrated} 个 Target，{len(events.warnings)} 条警告")

    logger.info(f"Integration completed: targets={integrated}, warnings={len(events.warnings)}")
    logger.log_separator("Integration Session End")
    return 0


def main():
    sys.exit(run())


if __name__ == '__main__':
    main()
