"""Terminal front end for the chatbot."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO

from membot.chatlogic import ChatLogic

DEFAULT_GRAPH_PATH = "../src/answergraph.txt"


def run_chat(graph_path: str, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Load the answer graph and chat line by line until the input ends."""
    source = stdin if stdin is not None else sys.stdin
    sink = stdout if stdout is not None else sys.stdout

    def show(message: str) -> None:
        sink.write(message + "\n")
        sink.flush()

    logic = ChatLogic(on_response=show)
    logic.load_answer_graph(graph_path)
    for line in source:
        logic.send_message_to_chatbot(line.rstrip("\r\n"))


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="membot", description="Chat with the memory bot.")
    parser.add_argument(
        "graph",
        nargs="?",
        default=DEFAULT_GRAPH_PATH,
        help="answer graph file (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    try:
        run_chat(args.graph)
    except OSError as exc:
        print(f"File could not be opened: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Invalid answer graph: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())