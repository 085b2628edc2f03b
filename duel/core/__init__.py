"""Duel Core - Data Model"""
from .player import Player
from .level import Level, Tiles
from .events import event_bus, CheckPassedEvent, SelfTestCompletedEvent
from .reporting import LoggerHandler
