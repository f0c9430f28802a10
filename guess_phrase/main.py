"""
猜词派对游戏主程序入口
Guess the Phrase Main Entry
"""
import sys
import argparse

from .app import Application, LaunchOptions
from .utils.logger import setup_logger, set_global_level

logger = setup_logger("GTP.Main")


def build_parser() -> argparse.ArgumentParser:
    """构建命令行解析器"""
    parser = argparse.ArgumentParser(description='猜词派对游戏 (Guess the Phrase)')
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路径（默认: config/config.yaml）'
    )
    parser.add_argument('--phrases', type=str, default=None,
                        help='词条文件（每行一个，支持 "词条 :: 提示"）')
    parser.add_argument('--sample', action='store_true', help='使用内置示例词条')
    parser.add_argument('--timer', type=int, default=None, help='回合时长（10-600秒）')
    parser.add_argument('--loop', dest='loop', action='store_true', default=None,
                        help='词卡用完后从头循环')
    parser.add_argument('--no-shuffle', dest='shuffle', action='store_false', default=None,
                        help='不洗牌')
    parser.add_argument('--tilt', dest='tilt', action='store_true', default=None,
                        help='开启倾斜控制')
    parser.add_argument('--trace', type=str, default=None,
                        help='回放姿态轨迹 CSV（表头 time,beta）')
    parser.add_argument('--log-level', type=str, default=None,
                        help='日志级别（DEBUG, INFO, WARNING, ERROR）')
    return parser


def options_from_args(args: argparse.Namespace) -> LaunchOptions:
    """命令行参数转启动选项"""
    return LaunchOptions(
        phrases_file=args.phrases,
        use_sample=args.sample,
        timer_seconds=args.timer,
        loop_when_finished=args.loop,
        shuffle_on_start=args.shuffle,
        tilt_enabled=args.tilt,
        trace_path=args.trace,
        log_level=args.log_level
    )


def main(argv=None):
    """主函数"""
    args = build_parser().parse_args(argv)

    if args.log_level:
        set_global_level(args.log_level)

    logger.info("=" * 50)
    logger.info("猜词派对游戏启动")
    logger.info("Guess the Phrase Starting")
    logger.info("=" * 50)

    app = Application(config_path=args.config, options=options_from_args(args))

    try:
        success = app.start()
        if not success:
            logger.error("应用程序启动失败")
            sys.exit(1)
    except KeyboardInterrupt:
        logger.info("用户中断程序")
    except Exception as e:
        logger.error(f"程序异常退出: {e}", exc_info=True)
        sys.exit(1)
    finally:
        logger.info("程序退出")
        logger.info("Program Exited")


if __name__ == "__main__":
    main()
