from .audio_delivery import TelegramAudioDelivery
from .music_messenger import MusicMessenger

__all__ = ["MusicMessenger", "TelegramAudioDelivery"]
