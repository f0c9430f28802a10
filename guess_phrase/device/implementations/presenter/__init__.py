"""
展示层实现模块
Presenter Implementation
"""
from .console_presenter import ConsolePresenter
from ...factory.device_factory import DeviceFactory

DeviceFactory.register('presenter', 'console', ConsolePresenter)

__all__ = ['ConsolePresenter']
