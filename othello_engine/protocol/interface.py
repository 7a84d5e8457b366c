"""
Text Protocol Implementation

This module implements a UCI-style line protocol for communication between
the Othello engine and a front end (board GUI, match runner, test harness).

Commands Supported:
    - engine: Identify engine
    - isready: Synchronization check
    - newgame: Start new game
    - position: Set board position
    - setoption: Change strategy or depth
    - go: Start searching
    - legal: List legal moves
    - eval: Report evaluation and piece counts
    - stop: Wait for the search to finish
    - quit: Shutdown engine

Squares use algebraic names: column a-h then row 1-8, so (2, 3) is "d3".

Threading:
    - Main thread: Listen for commands
    - Search thread: Run the strategy on an immutable board snapshot
"""

import sys
import threading
import logging
import time
from pathlib import Path
from typing import Optional

from othello_engine import __version__
from othello_engine.board.representation import (
    BoardState,
    Side,
    decode_board,
    initial_state,
    parse_square,
    square_name,
)
from othello_engine.config import SearchConfig
from othello_engine.evaluation.positional import count_pieces, evaluate_position
from othello_engine.game.session import GameOverError, GameSession
from othello_engine.rules.moves import InvalidMove, describe_moves, list_legal_moves
from othello_engine.search.minimax import find_best_move
from othello_engine.strategies import STRATEGIES, get_strategy

DEFAULT_LOG_DIR = Path.home() / ".othello_engine"

SIDE_NAMES = {"black": Side.BLACK, "b": Side.BLACK, "white": Side.WHITE, "w": Side.WHITE}


def setup_logger(debug=True, log_dir: Optional[Path] = None):
    """
    Setup file-based logger for protocol debugging.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_dir: Directory for engine.log (default: ~/.othello_engine)

    Returns:
        Configured logger instance
    """
    log_dir = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "engine.log"

    logger = logging.getLogger("othello_engine.protocol")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class EngineProtocol:
    """
    Line-protocol front for the Othello engine.

    Attributes:
        session: Current game
        config: Strategy name and depth used by 'go'
        search_thread: Background thread for search

    Methods:
        run: Main command loop
        handle_engine: Respond to 'engine' command
        handle_isready: Respond to 'isready' command
        handle_position: Set board position
        handle_go: Start search
        handle_stop: Wait for search
        handle_quit: Shutdown engine
    """

    def __init__(self, config: Optional[SearchConfig] = None, debug=True, log_dir: Optional[Path] = None):
        """
        Initialize the protocol handler.

        Args:
            config: Search configuration (default: minimax at depth 4)
            debug: Enable debug logging (default: True)
            log_dir: Directory for the log file (default: ~/.othello_engine)
        """
        self.session = GameSession()
        self.config = config if config else SearchConfig()

        # Search state
        self.search_thread: Optional[threading.Thread] = None

        # Engine info
        self.name = "OthelloEngine"
        self.version = __version__
        self.author = "Othello Engine Developers"

        self.logger = setup_logger(debug=debug, log_dir=log_dir)
        self.logger.info("=== Othello Engine Started ===")

    def _send(self, message: str):
        print(message)
        sys.stdout.flush()
        self.logger.debug(f"<<< {message}")

    def run(self):
        """
        Main command loop.

        Listens for commands on stdin and responds on stdout.
        Runs until 'quit' command is received or stdin is closed.
        """
        while True:
            try:
                command = input().strip()

                if not command:
                    continue

                self.logger.debug(f">>> {command}")

                tokens = command.split()
                cmd = tokens[0].lower()

                if cmd == "engine":
                    self.handle_engine()

                elif cmd == "isready":
                    self.handle_isready()

                elif cmd == "newgame":
                    self.handle_newgame()

                elif cmd == "position":
                    self.handle_position(tokens)

                elif cmd == "setoption":
                    self.handle_setoption(tokens)

                elif cmd == "go":
                    self.handle_go(tokens)

                elif cmd == "legal":
                    self.handle_legal()

                elif cmd == "eval":
                    self.handle_eval()

                elif cmd == "stop":
                    self.handle_stop()

                elif cmd == "quit":
                    self.handle_quit()
                    break

                else:
                    self.logger.debug(f"Unknown command ignored: {command}")

            except EOFError:
                self.logger.info("EOF received, shutting down")
                break
            except Exception as e:
                self.logger.error(f"Command error: {e}", exc_info=True)
                print(f"# Error: {e}", file=sys.stderr)

    def handle_engine(self):
        """
        Handle 'engine' command - identify engine.

        Response:
            id name OthelloEngine <version>
            id author ...
            option ... (one line per option)
            engineok
        """
        self.logger.info("Handling: engine")

        self._send(f"id name {self.name} {self.version}")
        self._send(f"id author {self.author}")

        strategies = " ".join(f"var {name}" for name in sorted(STRATEGIES))
        self._send(f"option name Strategy type combo default {self.config.strategy} {strategies}")
        self._send(f"option name Depth type spin default {self.config.max_depth} min 0 max 8")
        self._send("engineok")

    def handle_isready(self):
        """
        Handle 'isready' command - synchronization.

        Waits for a running search so that 'readyok' always follows its
        'bestmove'.
        """
        self.logger.info("Handling: isready")
        self.wait_for_search()
        self._send("readyok")

    def handle_newgame(self):
        """Handle 'newgame' command - reset for new game."""
        self.logger.info("Handling: newgame - resetting session")
        self.wait_for_search()
        self.session.reset()

    def handle_position(self, tokens):
        """
        Handle 'position' command - set board position.

        Formats:
            position startpos
            position startpos moves d3 c5
            position board <64 chars> <black|white>
            position board <64 chars> <black|white> moves d3

        Args:
            tokens: Command tokens (e.g., ['position', 'startpos', 'moves', 'd3'])
        """
        self.logger.info(f"Handling: position {' '.join(tokens[1:])}")

        if len(tokens) < 2:
            self.logger.warning("Position command with insufficient arguments")
            return

        if tokens[1] == "startpos":
            state = initial_state()
            to_move = Side.BLACK
            move_index = 2
        elif tokens[1] == "board":
            if len(tokens) < 4:
                self.logger.warning("Position board command needs a board and a side")
                return
            try:
                state = decode_board(tokens[2])
            except ValueError as e:
                self.logger.error(f"Invalid board: {e}")
                print(f"# Invalid board: {e}", file=sys.stderr)
                return
            to_move = SIDE_NAMES.get(tokens[3].lower())
            if to_move is None:
                self.logger.error(f"Invalid side: {tokens[3]}")
                print(f"# Invalid side: {tokens[3]}", file=sys.stderr)
                return
            move_index = 4
        else:
            self.logger.warning(f"Unknown position type: {tokens[1]}")
            return

        self.wait_for_search()
        self.session = GameSession(state=state, to_move=to_move)

        if move_index < len(tokens) and tokens[move_index] == "moves":
            moves_applied = []
            for move_str in tokens[move_index + 1:]:
                try:
                    row, col = parse_square(move_str)
                    self.session.play(row, col)
                    moves_applied.append(move_str)
                except InvalidMove as e:
                    self.logger.error(f"Illegal move: {move_str} - {e}")
                    print(f"# Illegal move: {move_str}", file=sys.stderr)
                    break
                except ValueError as e:
                    self.logger.error(f"Invalid move format: {move_str} - {e}")
                    print(f"# Invalid move format: {move_str} - {e}", file=sys.stderr)
                    break
                except GameOverError as e:
                    self.logger.error(f"Move after game over: {move_str} - {e}")
                    print(f"# Game over: {move_str}", file=sys.stderr)
                    break

            if moves_applied:
                self.logger.debug(f"Applied moves: {' '.join(moves_applied)}")

        to_move = self.session.to_move.label if self.session.to_move else "none"
        self.logger.info(f"Position updated, {to_move} to move")

    def handle_setoption(self, tokens):
        """
        Handle 'setoption' command.

        Formats:
            setoption name Strategy value minimax
            setoption name Depth value 3
        """
        self.logger.info(f"Handling: setoption {' '.join(tokens[1:])}")

        try:
            name = tokens[tokens.index("name") + 1].lower()
            value = tokens[tokens.index("value") + 1]
        except (ValueError, IndexError):
            self.logger.warning("setoption needs 'name <option> value <value>'")
            return

        if name == "strategy":
            self.config = SearchConfig(max_depth=self.config.max_depth, strategy=value.lower())
        elif name == "depth":
            self.config = SearchConfig(max_depth=int(value), strategy=self.config.strategy)
        else:
            self.logger.debug(f"Unknown option ignored: {name}")

    def handle_go(self, tokens):
        """
        Handle 'go' command - start search.

        Formats:
            go
            go depth 3
            go strategy mobility

        Args:
            tokens: Command tokens (e.g., ['go', 'depth', '3'])
        """
        self.logger.info(f"Handling: go {' '.join(tokens[1:])}")

        depth = self.config.max_depth
        strategy_name = self.config.strategy

        i = 1
        while i < len(tokens):
            if tokens[i] == "depth" and i + 1 < len(tokens):
                depth = int(tokens[i + 1])
                i += 2
            elif tokens[i] == "strategy" and i + 1 < len(tokens):
                strategy_name = tokens[i + 1].lower()
                i += 2
            else:
                i += 1

        config = SearchConfig(max_depth=depth, strategy=strategy_name)

        if self.session.to_move is None:
            self.logger.info("Game is over, no move to search")
            self._send("bestmove none")
            return

        self.wait_for_search()

        self.logger.info(f"Starting search thread: strategy={config.strategy}, depth={config.max_depth}")

        self.search_thread = threading.Thread(
            target=self._search_thread,
            args=(config, self.session.state, self.session.to_move),
        )
        self.search_thread.start()

    def _search_thread(self, config: SearchConfig, state: BoardState, side: Side):
        """
        Background thread for search.

        Output:
            info depth X score Y nodes Z time T   (minimax only)
            bestmove <square>
        """
        start_time = time.time()

        try:
            self.logger.info(f"Search started: side={side.label}, strategy={config.strategy}")

            if config.strategy == "minimax":
                best_move, score, nodes = find_best_move(state, side, max_depth=config.max_depth)
                elapsed_ms = int((time.time() - start_time) * 1000)
                self._send(
                    f"info depth {config.max_depth} score {int(score)} "
                    f"nodes {nodes} time {elapsed_ms}"
                )
            else:
                strategy = get_strategy(config.strategy)
                best_move = strategy(state, side)
                elapsed_ms = int((time.time() - start_time) * 1000)

            self.logger.info(f"Search complete: best_move={square_name(*best_move)}, time={elapsed_ms}ms")
            self._send(f"bestmove {square_name(*best_move)}")

        except Exception as e:
            elapsed_time = time.time() - start_time
            self.logger.error(f"Search error after {elapsed_time:.3f}s: {e}", exc_info=True)
            print(f"# Search error: {e}", file=sys.stderr)

            # Send a legal move as fallback
            legal_moves = list_legal_moves(state, side)
            if legal_moves:
                fallback_move = square_name(*legal_moves[0])
                self.logger.warning(f"Using fallback move: {fallback_move}")
                self._send(f"bestmove {fallback_move}")
            else:
                self.logger.error("No legal moves available for fallback!")

        finally:
            self.logger.debug("Search thread finished")

    def handle_legal(self):
        """Handle 'legal' command - list legal moves for the side to move."""
        self.logger.info("Handling: legal")
        moves = self.session.legal_moves()
        self._send(f"legal {describe_moves(moves)}".rstrip())

    def handle_eval(self):
        """
        Handle 'eval' command - report the static evaluation.

        Response:
            eval score S black B white W tomove <black|white|none> gameover <true|false>
        """
        self.logger.info("Handling: eval")
        state = self.session.state
        to_move = self.session.to_move.label if self.session.to_move else "none"
        self._send(
            f"eval score {evaluate_position(state)} "
            f"black {count_pieces(state, Side.BLACK)} "
            f"white {count_pieces(state, Side.WHITE)} "
            f"tomove {to_move} "
            f"gameover {str(self.session.is_over).lower()}"
        )

    def wait_for_search(self, timeout: Optional[float] = None):
        """Block until the current search thread (if any) has finished."""
        if self.search_thread and self.search_thread.is_alive():
            self.logger.debug("Waiting for search thread to finish")
            self.search_thread.join(timeout=timeout)

    def handle_stop(self):
        """
        Handle 'stop' command.

        Search cannot be interrupted, so this waits (bounded) for the
        search thread to deliver its move.
        """
        self.logger.info("Handling: stop")

        if self.search_thread and self.search_thread.is_alive():
            self.logger.debug("Waiting for search thread to finish (timeout=5.0s)")
            self.search_thread.join(timeout=5.0)
            if self.search_thread.is_alive():
                self.logger.warning("Search thread did not finish within timeout")

    def handle_quit(self):
        """Handle 'quit' command - shutdown engine."""
        self.logger.info("Handling: quit - shutting down engine")

        self.wait_for_search()

        self.logger.info("=== Othello Engine Stopped ===")
