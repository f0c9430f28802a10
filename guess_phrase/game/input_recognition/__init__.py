"""
输入识别模块
Input Recognition Module
"""
from .rate_limiter import RateLimiter
from .swipe_classifier import SwipeClassifier, SwipeGesture
from .tilt_recognizer import TiltRecognizer, TiltCalibration, TiltPhase, tilt_status_text

__all__ = [
    'RateLimiter',
    'SwipeClassifier',
    'SwipeGesture',
    'TiltRecognizer',
    'TiltCalibration',
    'TiltPhase',
    'tilt_status_text'
]
