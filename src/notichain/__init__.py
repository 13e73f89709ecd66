"""notichain — composable notification decorator chains."""

from notichain.domain.decorators import EmojiDecorator, TimestampDecorator, UrgentDecorator
from notichain.domain.notifier import Notifier, NotifierDecorator, SimpleNotifier

__version__ = "0.1.0"

__all__ = [
    "EmojiDecorator",
    "Notifier",
    "NotifierDecorator",
    "SimpleNotifier",
    "TimestampDecorator",
    "UrgentDecorator",
    "__version__",
]
