"""
键盘输入源
Keyboard Input Source

后台线程只负责读取标准输入并把解析后的命令放入队列，
所有命令都由应用主循环取出后再交给回合控制器，保证单线程处理。

命令：
    g            猜中
    p            跳过
    n / 回车     下一个（不计分）
    s DX DY MS   模拟一次滑动（像素、毫秒）
    t on|off     开关倾斜控制
    m            请求运动权限
    e            提前结束回合
    a            再来一局
    q            退出
"""
import queue
import sys
import threading
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple
from ....utils.logger import setup_logger

logger = setup_logger("GTP.KeyboardInput")


@dataclass(frozen=True)
class InputCommand:
    """一条解析后的输入命令"""
    kind: str
    args: Tuple = ()


_SIMPLE_COMMANDS = {
    'g': InputCommand('tap', ('got',)),
    'p': InputCommand('tap', ('pass',)),
    'n': InputCommand('tap', ('next',)),
    '': InputCommand('tap', ('next',)),
    'e': InputCommand('end'),
    'a': InputCommand('again'),
    'm': InputCommand('permission'),
    'q': InputCommand('quit'),
}


def parse_command(line: str) -> Optional[InputCommand]:
    """
    解析一行输入

    Args:
        line: 原始输入行

    Returns:
        Optional[InputCommand]: 命令，无法识别时为None
    """
    parts = line.strip().lower().split()
    head = parts[0] if parts else ''

    if head in _SIMPLE_COMMANDS and len(parts) <= 1:
        return _SIMPLE_COMMANDS[head]

    if head == 's' and len(parts) == 4:
        try:
            dx, dy, ms = float(parts[1]), float(parts[2]), float(parts[3])
        except ValueError:
            return None
        return InputCommand('swipe', (dx, dy, ms / 1000.0))

    if head == 't' and len(parts) == 2 and parts[1] in ('on', 'off'):
        return InputCommand('tilt', (parts[1] == 'on',))

    return None


class KeyboardInput:
    """标准输入读取线程"""

    def __init__(self, stream: Optional[TextIO] = None,
                 commands: Optional["queue.Queue[InputCommand]"] = None):
        """
        Args:
            stream: 输入流（默认标准输入）
            commands: 命令队列（默认新建）
        """
        self.stream = stream or sys.stdin
        self.commands: "queue.Queue[InputCommand]" = commands or queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._stop = threading.Event()

    def start(self):
        """启动读取线程"""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._read_loop, name="KeyboardInput", daemon=True)
        self._thread.start()
        logger.debug("键盘输入线程已启动")

    def stop(self):
        """请求读取线程退出（阻塞在读取上的线程会在下一行输入后退出）"""
        self._stop.set()

    def poll(self) -> Optional[InputCommand]:
        """
        非阻塞取出一条命令

        Returns:
            Optional[InputCommand]: 命令，队列为空时为None
        """
        try:
            return self.commands.get_nowait()
        except queue.Empty:
            return None

    def _read_loop(self):
        for line in self.stream:
            if self._stop.is_set():
                break
            command = parse_command(line)
            if command is None:
                logger.warning(f"无法识别的命令: {line.strip()!r}")
                continue
            self.commands.put(command)
            if command.kind == 'quit':
                break
        else:
            # 输入流结束视为退出
            self.commands.put(InputCommand('quit'))
