"""
应用程序主类
Application Main Class
"""
import signal
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO
from .device.config_manager import DeviceConfigManager, DEFAULT_CONFIG_PATH
from .device.base import (
    PresenterBase, OrientationSensorBase, MotionPermissionBase, SettingsStoreBase
)
from .device.implementations import (
    ConsolePresenter, TraceOrientationSensor, KeyboardInput, InputCommand
)
from .game import RoundController, RoundMode, EndReason, GameSettings
from .game.game_logic import DeckEntry, parse_phrases, load_phrases, SAMPLE_PHRASES
from .utils.logger import setup_logger, setup_logger_from_config, set_global_level
from .utils.config_loader import ConfigLoader
from .utils.error_handler import global_error_handler
from .utils.exceptions import (
    ValidationError, SensorUnavailable, ConfigurationException
)
from .utils.scheduling import create_scheduler

logger = setup_logger("GTP.App")


@dataclass
class LaunchOptions:
    """命令行覆盖项，None 表示沿用配置"""
    phrases_file: Optional[str] = None
    use_sample: bool = False
    timer_seconds: Optional[int] = None
    loop_when_finished: Optional[bool] = None
    shuffle_on_start: Optional[bool] = None
    tilt_enabled: Optional[bool] = None
    trace_path: Optional[str] = None
    log_level: Optional[str] = None


class Application:
    """应用程序主类"""

    LOOP_INTERVAL = 0.01

    def __init__(self, config_path: Optional[str] = None,
                 options: Optional[LaunchOptions] = None,
                 input_stream: Optional[TextIO] = None,
                 install_signal_handlers: bool = True):
        """
        初始化应用程序

        Args:
            config_path: 配置文件路径
            options: 命令行覆盖项
            input_stream: 命令输入流（默认标准输入）
            install_signal_handlers: 是否注册 SIGINT/SIGTERM 处理
        """
        self.config_path = str(config_path or DEFAULT_CONFIG_PATH)
        self.options = options or LaunchOptions()
        self.config = {}

        # 协作设备
        self.device_manager: Optional[DeviceConfigManager] = None
        self.presenter: Optional[PresenterBase] = None
        self.orientation_sensor: Optional[OrientationSensorBase] = None
        self.motion_permission: Optional[MotionPermissionBase] = None
        self.settings_store: Optional[SettingsStoreBase] = None

        # 游戏组件
        self.scheduler = create_scheduler()
        self.settings = GameSettings()
        self.entries: List[DeckEntry] = []
        self.saved_settings: dict = {}
        self.round_controller: Optional[RoundController] = None
        self.keyboard = KeyboardInput(stream=input_stream)

        # 运行状态
        self.is_running = False
        self.should_exit = False

        if install_signal_handlers:
            signal.signal(signal.SIGINT, self._signal_handler)
            signal.signal(signal.SIGTERM, self._signal_handler)

        logger.info("应用程序初始化完成")

    def _signal_handler(self, signum, frame):
        """信号处理函数"""
        logger.info(f"收到信号 {signum}，准备退出")
        self.should_exit = True

    def initialize(self) -> bool:
        """
        初始化所有组件

        Returns:
            bool: 初始化是否成功
        """
        try:
            logger.info("=" * 50)
            logger.info("开始初始化应用程序")
            logger.info("=" * 50)

            # 1. 加载配置
            if not self._load_config():
                return False

            # 2. 初始化协作设备
            if not self._initialize_devices():
                return False

            # 3. 合并设置
            self._load_settings()

            # 4. 读取词条
            if not self._load_phrases():
                return False

            # 5. 初始化回合控制器
            self._initialize_round_controller()

            logger.info("=" * 50)
            logger.info("应用程序初始化成功")
            logger.info("=" * 50)
            return True

        except Exception as e:
            logger.error(f"初始化失败: {e}", exc_info=True)
            global_error_handler.handle(e, "初始化")
            return False

    def _load_config(self) -> bool:
        """加载配置文件，文件不存在时使用内置默认值"""
        try:
            self.config = ConfigLoader.load_config(self.config_path)
        except FileNotFoundError:
            logger.warning(f"配置文件不存在: {self.config_path}，使用默认配置")
            self.config = {'presenter': {'type': 'console'}}
        except Exception as e:
            global_error_handler.handle(ConfigurationException(str(e)), "加载配置")
            return False

        logging_config = ConfigLoader.get_logging_config(self.config)
        if logging_config:
            setup_logger_from_config(logging_config, "GTP")
        if self.options.log_level:
            # 命令行级别优先于配置文件
            set_global_level(self.options.log_level)
        return True

    def _initialize_devices(self) -> bool:
        """创建展示层、传感器、权限门和设置存储"""
        logger.info("初始化协作设备...")
        self.device_manager = DeviceConfigManager(self.config_path, config=self.config)
        self.device_manager.create_all_devices()

        self.presenter = self.device_manager.get_presenter() or ConsolePresenter()
        self.motion_permission = self.device_manager.get_motion_permission()
        self.settings_store = self.device_manager.get_settings_store()

        if self.options.trace_path:
            self.orientation_sensor = TraceOrientationSensor(trace_path=self.options.trace_path)
        else:
            self.orientation_sensor = self.device_manager.get_orientation_sensor()

        if self.orientation_sensor is not None and not self.orientation_sensor.connect():
            global_error_handler.handle(
                SensorUnavailable("姿态传感器连接失败，倾斜控制不可用"), "连接传感器"
            )
            self.orientation_sensor = None

        logger.info(f"✓ 展示层: {type(self.presenter).__name__}")
        logger.info(f"{'✓' if self.orientation_sensor else '✗'} 姿态传感器")
        logger.info(f"{'✓' if self.settings_store else '✗'} 设置存储")
        return True

    def _load_settings(self):
        """配置默认值 < 已保存设置 < 命令行"""
        game_config = ConfigLoader.get_game_config(self.config)
        settings = GameSettings.from_dict(game_config)

        if self.settings_store is not None:
            self.saved_settings = self.settings_store.load()
            settings = GameSettings.from_dict(self.saved_settings, base=settings)

        overrides = {
            'timer_seconds': self.options.timer_seconds,
            'loop_when_finished': self.options.loop_when_finished,
            'shuffle_on_start': self.options.shuffle_on_start,
            'tilt_enabled': self.options.tilt_enabled,
        }
        overrides = {k: v for k, v in overrides.items() if v is not None}
        self.settings = GameSettings.from_dict(overrides, base=settings)
        logger.info(f"当前设置: {self.settings.to_dict()}")

    def _load_phrases(self) -> bool:
        """读取词条来源：--sample > 命令行文件 > 上次保存的词条 > 配置文件 > 示例"""
        if self.options.use_sample:
            return self._use_sample_phrases()

        if self.options.phrases_file:
            return self._read_phrases_file(self.options.phrases_file)

        saved_text = self.saved_settings.get('phrases')
        saved_entries = parse_phrases(saved_text) if isinstance(saved_text, str) else []
        if saved_entries:
            self.entries = saved_entries
            logger.info(f"使用上次保存的词条: {len(self.entries)} 个")
            return True

        phrases_file = ConfigLoader.get_game_config(self.config).get('phrases_file')
        if phrases_file:
            return self._read_phrases_file(phrases_file)

        return self._use_sample_phrases()

    def _use_sample_phrases(self) -> bool:
        self.entries = parse_phrases(SAMPLE_PHRASES)
        logger.info(f"使用示例词条: {len(self.entries)} 个")
        return True

    def _read_phrases_file(self, phrases_file: str) -> bool:
        try:
            self.entries = load_phrases(phrases_file)
        except OSError as e:
            global_error_handler.handle(
                ConfigurationException(f"无法读取词条文件: {e}", config_key='phrases_file'),
                "读取词条"
            )
            return False
        return True

    def _initialize_round_controller(self):
        """初始化回合控制器"""
        logger.info("初始化回合控制器...")
        self.round_controller = RoundController(
            scheduler=self.scheduler,
            presenter=self.presenter,
            settings=self.settings,
            settings_store=self.settings_store,
            motion_permission=self.motion_permission,
            orientation_sensor=self.orientation_sensor
        )
        self.round_controller.on_mode_changed = self._on_mode_changed
        logger.info("✓ 回合控制器初始化成功")

    def _on_mode_changed(self, mode: RoundMode):
        """模式改变回调"""
        logger.debug(f"回合模式改变: {mode}")
        if mode == RoundMode.RUNNING and isinstance(self.orientation_sensor, TraceOrientationSensor):
            self.orientation_sensor.play(self.scheduler)
        elif mode == RoundMode.FINISHED:
            if isinstance(self.orientation_sensor, TraceOrientationSensor):
                self.orientation_sensor.stop()
            logger.info("输入 a 再来一局，q 退出")

    def start_round(self) -> bool:
        """
        用当前词条开始一回合

        Returns:
            bool: 是否开始成功
        """
        try:
            self.round_controller.start_round(self.entries)
        except ValidationError as e:
            global_error_handler.handle(e, "开始回合")
            return False

        if self.round_controller.needs_motion_permission():
            logger.info("倾斜控制需要运动权限，输入 m 请求授权")
        return True

    def dispatch(self, command: InputCommand):
        """
        把一条输入命令交给回合控制器

        Args:
            command: 输入命令
        """
        controller = self.round_controller
        if command.kind == 'tap':
            controller.tap(command.args[0])
        elif command.kind == 'swipe':
            dx, dy, dt = command.args
            now = controller.clock()
            controller.pointer_down(0.0, 0.0, now)
            controller.pointer_up(dx, dy, now + dt)
        elif command.kind == 'tilt':
            controller.set_tilt_enabled(command.args[0])
        elif command.kind == 'permission':
            controller.request_motion_permission()
        elif command.kind == 'end':
            controller.end_round(EndReason.MANUAL)
        elif command.kind == 'again':
            controller.play_again()
        elif command.kind == 'quit':
            self.should_exit = True
        else:
            logger.warning(f"未知命令: {command}")

    def run(self):
        """运行应用程序主循环"""
        if not self.is_running:
            logger.error("应用程序未初始化，无法运行")
            return

        logger.info("=" * 50)
        logger.info("应用程序主循环启动")
        logger.info("=" * 50)

        try:
            if not self.start_round():
                return

            self.keyboard.start()
            while not self.should_exit:
                # 键盘线程只入队，命令在这里串行处理
                command = self.keyboard.poll()
                while command is not None and not self.should_exit:
                    self.dispatch(command)
                    command = self.keyboard.poll()

                self.scheduler.run(blocking=False)
                time.sleep(self.LOOP_INTERVAL)

        except KeyboardInterrupt:
            logger.info("收到中断信号")
        except Exception as e:
            logger.error(f"主循环异常: {e}", exc_info=True)
            global_error_handler.handle(e, "主循环")
        finally:
            self.cleanup()

    def cleanup(self):
        """清理资源"""
        logger.info("开始清理资源...")

        try:
            self.keyboard.stop()

            if self.round_controller:
                self.round_controller.end_round(EndReason.MANUAL)

            if self.orientation_sensor and self.orientation_sensor.is_connected():
                self.orientation_sensor.disconnect()
                logger.info("✓ 姿态传感器已断开")

            logger.info("资源清理完成")

        except Exception as e:
            logger.error(f"清理资源时发生异常: {e}", exc_info=True)

        self.is_running = False

    def start(self) -> bool:
        """
        启动应用程序

        Returns:
            bool: 启动是否成功
        """
        if self.initialize():
            self.is_running = True
            self.run()
            return True

        logger.error("应用程序启动失败")
        return False
