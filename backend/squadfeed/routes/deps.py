"""Request dependencies resolving the per-app session state."""
from fastapi import Request
from squadfeed.session import GameSession
from squadfeed.settings import Settings
from squadfeed.store import WoundLog


def get_session(request: Request) -> GameSession:
    return request.app.state.session


def get_wound_log(request: Request) -> WoundLog:
    return request.app.state.wound_log


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
