"""
Text Protocol

This module implements a UCI-style line protocol so that a front end can
drive the engine over stdin/stdout without importing it.

Protocol Flow:
    GUI → "engine"
    Engine → "id name OthelloEngine 0.1.0"
    Engine → "id author ..."
    Engine → "engineok"
    GUI → "isready"
    Engine → "readyok"
    GUI → "position startpos moves d3 c5"
    GUI → "go depth 4"
    Engine → "info depth 4 score 3 nodes 1234 time 850"
    Engine → "bestmove f6"
"""

from othello_engine.protocol.interface import EngineProtocol, setup_logger

__all__ = ['EngineProtocol', 'setup_logger']
