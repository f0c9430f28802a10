"""
游戏逻辑模块
Game Logic Module
"""
from .round_controller import RoundController
from .game_logic import (
    Action, DeckEntry, Deck, build_deck, parse_phrases, load_phrases, format_phrases, SAMPLE_PHRASES,
    RoundState, RoundResults, EndReason, RoundTimer, GameSettings
)
from .state_machine import RoundMode, RoundStateMachine
from .input_recognition import (
    RateLimiter, SwipeClassifier, TiltRecognizer, TiltCalibration, TiltPhase
)

__all__ = [
    'RoundController',
    'Action',
    'DeckEntry',
    'Deck',
    'build_deck',
    'parse_phrases',
    'load_phrases',
    'format_phrases',
    'SAMPLE_PHRASES',
    'RoundState',
    'RoundResults',
    'EndReason',
    'RoundTimer',
    'GameSettings',
    'RoundMode',
    'RoundStateMachine',
    'RateLimiter',
    'SwipeClassifier',
    'TiltRecognizer',
    'TiltCalibration',
    'TiltPhase'
]
