"""Domain enums package."""

from giftcircle.domain.enums.event_type import EventType

__all__ = ["EventType"]
