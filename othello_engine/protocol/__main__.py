"""
Main entry point for running the engine behind the text protocol.

Usage:
    python -m othello_engine.protocol
"""

from othello_engine.protocol.interface import EngineProtocol

if __name__ == "__main__":
    engine = EngineProtocol()
    engine.run()
