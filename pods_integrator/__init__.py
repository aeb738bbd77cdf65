"""Pods Integrator

把生成的依赖库（Pods 静态库、xcconfig、资源拷贝脚本）集成到用户的 Xcode 工程中。

主要组件:
- TargetIntegrator: 单个库 / 工程组合的集成器
- IntegrationTarget: 待集成库的只读描述
"""
__version__ = "0.3.0"
