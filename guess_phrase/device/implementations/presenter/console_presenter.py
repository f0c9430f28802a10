"""
终端展示实现
Console Presenter Implementation
"""
import sys
from typing import Optional, TextIO
from ...base.presenter_base import PresenterBase
from ....game.game_logic import Action, DeckEntry, RoundResults, RoundState
from ....game.input_recognition.tilt_recognizer import TiltPhase, tilt_status_text
from ....utils.logger import setup_logger

logger = setup_logger("GTP.ConsolePresenter")


class ConsolePresenter(PresenterBase):
    """把词卡、计分和结果输出到终端"""

    FEEDBACK_TEXT = {
        Action.GOT: "Got it!",
        Action.PASS: "Pass!",
        Action.NEXT: "Next",
    }

    def __init__(self, stream: Optional[TextIO] = None, show_hints: bool = True, time_every: int = 10):
        """
        初始化终端展示

        Args:
            stream: 输出流（默认标准输出）
            show_hints: 是否显示提示
            time_every: 每隔多少秒打印一次剩余时间（最后10秒每秒打印）
        """
        self.stream = stream or sys.stdout
        self.show_hints = show_hints
        self.time_every = max(1, int(time_every))
        self.last_status: Optional[str] = None
        self._last_time_left: Optional[int] = None

    def _write(self, text: str):
        self.stream.write(text + "\n")
        self.stream.flush()

    def on_phrase_shown(self, entry: Optional[DeckEntry]):
        """展示当前词卡"""
        if entry is None:
            self._write(">>> Done!")
            return
        self._write(f">>> {entry.phrase}")
        if self.show_hints and entry.hint:
            self._write(f"    ({entry.hint})")

    def on_action_applied(self, action: Action, index: int, state: RoundState):
        """显示动作反馈和计分"""
        self._write(f"[{self.FEEDBACK_TEXT[action]}] "
                    f"got={state.got} pass={state.passed} shown={state.shown}")

    def on_status_text(self, phase: TiltPhase):
        """显示倾斜状态，只在变化时输出"""
        text = tilt_status_text(phase is not TiltPhase.OFF, phase)
        if text == self.last_status:
            return
        self.last_status = text
        logger.debug(text)
        if phase in (TiltPhase.READY, TiltPhase.OFF, TiltPhase.NEEDS_PERMISSION):
            self._write(f"    {text}")

    def on_time_left(self, seconds: int):
        """按间隔打印剩余时间"""
        if seconds == self._last_time_left:
            return
        self._last_time_left = seconds
        if seconds <= 10 or seconds % self.time_every == 0:
            self._write(f"    [{seconds}s]")

    def on_round_finished(self, results: RoundResults):
        """显示回合结果"""
        self._last_time_left = None
        self._write("=" * 40)
        self._write(f"Round ended - {results.summary()}")
        self._write(f"Got: {results.got}  Pass: {results.passed}  Total: {results.shown}")
        self._write("=" * 40)

    def get_status(self) -> dict:
        """获取展示层状态信息"""
        return {
            "type": self.__class__.__name__,
            "show_hints": self.show_hints,
            "last_status": self.last_status
        }
