"""Shared pytest fixtures for the identity tests."""

from .identity import *  # noqa: F401,F403
