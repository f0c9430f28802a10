"""
猜词派对游戏
Guess the Phrase - party guessing round engine
"""
__version__ = "0.1.0"
