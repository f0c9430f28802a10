"""
游戏逻辑模块
Game Logic Module
"""
from .action import Action
from .deck import DeckEntry, Deck, build_deck, fisher_yates_shuffle
from .phrases import parse_phrases, load_phrases, format_phrases, SAMPLE_PHRASES
from .round_state import RoundState, RoundResults, EndReason
from .round_timer import RoundTimer
from .settings import GameSettings, clamp_timer_seconds

__all__ = [
    'Action',
    'DeckEntry',
    'Deck',
    'build_deck',
    'fisher_yates_shuffle',
    'parse_phrases',
    'load_phrases',
    'format_phrases',
    'SAMPLE_PHRASES',
    'RoundState',
    'RoundResults',
    'EndReason',
    'RoundTimer',
    'GameSettings',
    'clamp_timer_seconds'
]
