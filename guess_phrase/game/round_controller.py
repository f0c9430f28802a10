"""
回合控制器
Round Controller - 整合输入仲裁、计时和回合状态机
"""
import random
import sched
from typing import Callable, Iterable, Optional, Tuple, Union
from .state_machine import RoundMode, RoundStateMachine
from .game_logic import (
    Action, Deck, DeckEntry, EndReason, GameSettings, RoundResults, RoundState,
    RoundTimer, build_deck, format_phrases
)
from .input_recognition import SwipeClassifier, TiltPhase, TiltRecognizer
from ..device.base import (
    MotionPermissionBase, OrientationSample, OrientationSensorBase,
    PresenterBase, SettingsStoreBase
)
from ..utils.error_handler import global_error_handler
from ..utils.exceptions import PermissionDenied, SensorUnavailable, SettingsException
from ..utils.logger import setup_logger
from ..utils.scheduling import cancel_event, create_scheduler

logger = setup_logger("GTP.RoundController")


class RoundController:
    """回合控制器类，独占本回合的牌组、计数、计时器和倾斜校准"""

    def __init__(self,
                 scheduler: Optional[sched.scheduler] = None,
                 presenter: Optional[PresenterBase] = None,
                 settings: Optional[GameSettings] = None,
                 settings_store: Optional[SettingsStoreBase] = None,
                 motion_permission: Optional[MotionPermissionBase] = None,
                 orientation_sensor: Optional[OrientationSensorBase] = None,
                 clock: Optional[Callable[[], float]] = None,
                 rng: Optional[random.Random] = None):
        """
        初始化回合控制器

        Args:
            scheduler: 事件调度器（计时器和反馈延迟共用）
            presenter: 展示层（可选）
            settings: 游戏设置
            settings_store: 设置存储（可选）
            motion_permission: 运动权限门（可选，缺省视为无需授权）
            orientation_sensor: 姿态传感器（可选，缺省时倾斜通道不可用）
            clock: 单调时钟（默认使用调度器的时钟）
            rng: 洗牌用随机数生成器（可选）
        """
        self.scheduler = scheduler or create_scheduler(clock)
        self.clock = clock or self.scheduler.timefunc
        self.presenter = presenter
        self.settings = settings or GameSettings()
        self.settings_store = settings_store
        self.motion_permission = motion_permission
        self.orientation_sensor = orientation_sensor
        self.rng = rng

        self.state_machine = RoundStateMachine(initial_state=RoundMode.SETUP)
        self.state = RoundState(time_left=self.settings.timer_seconds)
        self.deck: Deck = ()
        self.source_entries: Tuple[DeckEntry, ...] = ()
        self.results: Optional[RoundResults] = None

        self.swipe = SwipeClassifier(is_running=self.is_running)
        self.tilt = TiltRecognizer(
            on_action=self.advance,
            is_running=self.is_running,
            clock=self.clock,
            on_phase=self._notify_status
        )
        self.timer = RoundTimer(
            self.scheduler,
            on_expired=self._on_time_up,
            on_tick=self._on_timer_tick,
            clock=self.clock
        )
        self._presentation_event: Optional[sched.Event] = None

        # 回调函数
        self.on_mode_changed: Optional[Callable[[RoundMode], None]] = None

        logger.info("回合控制器初始化完成")

    # ------------------------------------------------------------------
    # 查询
    # ------------------------------------------------------------------

    @property
    def mode(self) -> RoundMode:
        """当前模式"""
        return self.state_machine.get_current_state()

    def is_running(self) -> bool:
        """回合是否进行中"""
        return self.state_machine.is_in_state(RoundMode.RUNNING)

    @property
    def current_entry(self) -> Optional[DeckEntry]:
        """当前词卡，越过末尾时为None"""
        if 0 <= self.state.index < len(self.deck):
            return self.deck[self.state.index]
        return None

    # ------------------------------------------------------------------
    # 回合生命周期
    # ------------------------------------------------------------------

    def start_round(self, entries: Iterable[DeckEntry],
                    force_shuffle: bool = False) -> Optional[RoundState]:
        """
        开始新回合

        Args:
            entries: 词卡来源
            force_shuffle: 本回合强制洗牌（不改变偏好设置）

        Returns:
            Optional[RoundState]: 新回合状态，回合已在进行中时返回None

        Raises:
            ValidationError: 词卡来源为空（状态不变）
        """
        if not self.state_machine.can_transition_to(RoundMode.RUNNING):
            logger.warning(f"当前状态 {self.mode} 不能开始回合，忽略开始请求")
            return None

        entries = tuple(entries)
        shuffle = self.settings.shuffle_on_start or force_shuffle
        deck = build_deck(entries, shuffle=shuffle, rng=self.rng)

        self._teardown()
        self._request_settings_save(dict(self.settings.to_dict(), phrases=format_phrases(entries)))

        self.source_entries = entries
        self.deck = deck
        self.state = RoundState(time_left=self.settings.timer_seconds)
        self.results = None
        self.swipe.reset()
        self.tilt.reset()

        self.state_machine.transition_to(RoundMode.RUNNING)
        logger.info(f"回合开始: {len(deck)} 张词卡, {self.settings.timer_seconds} 秒, "
                    f"洗牌={shuffle}, 循环={self.settings.loop_when_finished}")

        self._enable_tilt_if_possible()
        self.timer.start(self.settings.timer_seconds)
        self._present_current()
        self._notify_mode_changed()
        return self.state

    def play_again(self) -> Optional[RoundState]:
        """
        用上一回合的词卡再来一局（强制洗牌，不持久化）

        Returns:
            Optional[RoundState]: 新回合状态，不在结果页时返回None
        """
        if not self.state_machine.is_in_state(RoundMode.FINISHED):
            logger.warning(f"当前状态 {self.mode} 不能再来一局")
            return None
        return self.start_round(self.source_entries, force_shuffle=True)

    def edit_list(self) -> bool:
        """
        从结果页返回设置页

        Returns:
            bool: 是否切换成功
        """
        if not self.state_machine.can_transition_to(RoundMode.SETUP):
            logger.warning(f"当前状态 {self.mode} 不能返回设置页")
            return False

        self._teardown()
        self.state_machine.transition_to(RoundMode.SETUP)
        self._notify_mode_changed()
        return True

    def end_round(self, reason: EndReason = EndReason.MANUAL) -> Optional[RoundResults]:
        """
        结束回合，回合未进行时不做任何事

        Args:
            reason: 结束原因

        Returns:
            Optional[RoundResults]: 结果快照（重复调用返回同一快照）
        """
        if not self.is_running():
            logger.debug(f"回合未进行，忽略结束请求: {reason}")
            return self.results

        self.results = RoundResults.from_state(self.state, len(self.deck), reason)
        self.state_machine.transition_to(RoundMode.FINISHED)

        self._teardown()
        self.tilt.disarm()

        logger.info(f"回合结束: {self.results.summary()} "
                    f"猜中={self.results.got}, 跳过={self.results.passed}")
        self._notify_presenter('on_round_finished', self.results)
        self._notify_mode_changed()
        return self.results

    # ------------------------------------------------------------------
    # 动作处理
    # ------------------------------------------------------------------

    def advance(self, action: Union[Action, str]) -> bool:
        """
        应用一个动作并推进牌组

        Args:
            action: 动作（GOT/PASS/NEXT）

        Returns:
            bool: 动作是否被接受
        """
        if not self.is_running():
            return False

        if not isinstance(action, Action):
            action = Action.from_string(action)

        state = self.state
        if self.current_entry is None:
            if self.settings.loop_when_finished and self.deck:
                state.index = 0
                logger.info("牌组循环回到开头")
                self._present_current()
                return True
            self.end_round(EndReason.END_OF_DECK)
            return True

        state.shown += 1
        if action is Action.GOT:
            state.got += 1
        elif action is Action.PASS:
            state.passed += 1
        state.index += 1

        logger.debug(f"动作 {action}: index={state.index}, shown={state.shown}, "
                     f"got={state.got}, pass={state.passed}")
        self._notify_presenter('on_action_applied', action, state.index, state)

        # 末尾检查在本次动作内立即完成
        if state.index >= len(self.deck):
            if self.settings.loop_when_finished and self.deck:
                state.index = 0
                logger.info("牌组循环回到开头")
            else:
                self.end_round(EndReason.END_OF_DECK)
                return True

        self._schedule_presentation()
        return True

    def tap(self, action: Union[Action, str]) -> bool:
        """点击按钮输入"""
        return self.advance(action)

    def pointer_down(self, x: float, y: float, t: Optional[float] = None) -> bool:
        """
        按下/触摸开始

        Args:
            x: 横坐标
            y: 纵坐标
            t: 时间戳（秒，默认当前时钟）

        Returns:
            bool: 是否开始记录手势
        """
        return self.swipe.on_start(x, y, self.clock() if t is None else t)

    def pointer_up(self, x: float, y: float, t: Optional[float] = None) -> Optional[Action]:
        """
        抬起/触摸结束，识别成功时推进牌组

        Returns:
            Optional[Action]: 识别出的动作
        """
        action = self.swipe.on_end(x, y, self.clock() if t is None else t)
        if action is not None:
            self.advance(action)
        return action

    def orientation_sample(self, sample: Union[OrientationSample, float, None]) -> Optional[Action]:
        """
        外部直接投递的姿态采样（与传感器订阅二选一）

        Args:
            sample: 姿态采样或前后倾角

        Returns:
            Optional[Action]: 触发的动作
        """
        if not isinstance(sample, OrientationSample):
            sample = OrientationSample(beta=sample)
        return self.tilt.on_sample(sample)

    # ------------------------------------------------------------------
    # 倾斜控制
    # ------------------------------------------------------------------

    def set_tilt_enabled(self, enabled: bool):
        """
        开关倾斜控制并保存偏好

        Args:
            enabled: 是否开启
        """
        self.settings.tilt_enabled = bool(enabled)
        self._request_settings_save({'tilt_enabled': self.settings.tilt_enabled})
        if self.is_running():
            self._enable_tilt_if_possible()

    def needs_motion_permission(self) -> bool:
        """倾斜已开启但授权尚未获得"""
        return (self.settings.tilt_enabled
                and self.motion_permission is not None
                and self.motion_permission.is_blocking())

    def request_motion_permission(self) -> bool:
        """
        请求运动权限，被拒绝时关闭倾斜控制

        Returns:
            bool: 是否获得授权
        """
        granted = True
        if self.motion_permission is not None and self.motion_permission.requires_permission():
            try:
                granted = bool(self.motion_permission.request())
            except Exception as e:
                logger.error(f"请求运动权限异常: {e}", exc_info=True)
                granted = False

        if not granted:
            global_error_handler.handle(
                PermissionDenied("未获得运动权限，倾斜控制保持关闭"), "请求运动权限"
            )
            self.settings.tilt_enabled = False
            self._request_settings_save({'tilt_enabled': False})
            self.tilt.enabled = False
            self.tilt.detach()
            self._notify_status(TiltPhase.OFF)
            return False

        logger.info("运动权限已获得")
        if self.is_running():
            self._enable_tilt_if_possible()
        return True

    def _enable_tilt_if_possible(self):
        if not self.settings.tilt_enabled:
            self.tilt.enabled = False
            self.tilt.detach()
            self._notify_status(TiltPhase.OFF)
            return

        if self.orientation_sensor is None:
            global_error_handler.handle(
                SensorUnavailable("未配置姿态传感器"), "开启倾斜控制"
            )
            self.tilt.enabled = False
            self._notify_status(TiltPhase.OFF)
            return

        if self.needs_motion_permission():
            self.tilt.enabled = False
            self.tilt.detach()
            self._notify_status(TiltPhase.NEEDS_PERMISSION)
            return

        self.tilt.enabled = True
        self.tilt.attach(self.orientation_sensor)
        self._notify_status(TiltPhase.READY)

    # ------------------------------------------------------------------
    # 内部
    # ------------------------------------------------------------------

    def _teardown(self):
        """停止计时、卸载倾斜订阅、取消待展示事件"""
        self.timer.stop()
        self.tilt.enabled = False
        self.tilt.detach()
        self.swipe.reset()
        cancel_event(self.scheduler, self._presentation_event)
        self._presentation_event = None

    def _schedule_presentation(self):
        cancel_event(self.scheduler, self._presentation_event)
        self._presentation_event = self.scheduler.enter(
            self.settings.feedback_delay, 0, self._present_current
        )

    def _present_current(self):
        self._presentation_event = None
        if not self.is_running():
            return
        self._notify_presenter('on_phrase_shown', self.current_entry)

    def _on_timer_tick(self, seconds: int):
        if not self.is_running():
            return
        self.state.time_left = seconds
        self._notify_presenter('on_time_left', seconds)

    def _on_time_up(self):
        self.end_round(EndReason.TIME_UP)

    def _request_settings_save(self, partial: dict):
        """保存设置（不关心结果，失败只记录）"""
        if self.settings_store is None:
            return
        try:
            if not self.settings_store.save(dict(partial)):
                raise SettingsException("设置存储返回失败")
        except SettingsException as e:
            global_error_handler.handle(e, "保存设置")
        except Exception as e:
            global_error_handler.handle(SettingsException(str(e)), "保存设置")

    def _notify_status(self, phase: TiltPhase):
        if not self.is_running():
            return
        self._notify_presenter('on_status_text', phase)

    def _notify_presenter(self, method: str, *args):
        if self.presenter is None:
            return
        try:
            getattr(self.presenter, method)(*args)
        except Exception as e:
            logger.error(f"展示层回调 {method} 异常: {e}", exc_info=True)

    def _notify_mode_changed(self):
        if self.on_mode_changed:
            try:
                self.on_mode_changed(self.mode)
            except Exception as e:
                logger.error(f"模式改变回调异常: {e}", exc_info=True)
