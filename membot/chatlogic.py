"""Loading of the answer graph and routing of messages between user and chatbot."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable
from os import PathLike
from typing import Optional, Union

from membot.chatbot import ChatBot
from membot.graph import GraphEdge, GraphNode

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_PATH = "../images/chatbot.png"

Token = tuple[str, str]


def parse_tokens(line: str) -> list[Token]:
    """Split a line of the form ``<TYPE:info><TYPE:info>...`` into (type, info) pairs.

    Tokens without a colon are skipped; parsing stops at the first incomplete token.
    """
    tokens: list[Token] = []
    rest = line
    while rest:
        front = rest.find("<")
        back = rest.find(">")
        if front < 0 or back < 0:
            break
        token = rest[front + 1 : back]
        token_type, sep, info = token.partition(":")
        if sep:
            tokens.append((token_type, info))
        rest = rest[back + 1 :]
    return tokens


def _first(tokens: Iterable[Token], token_type: str) -> Optional[str]:
    return next((info for kind, info in tokens if kind == token_type), None)


def _all(tokens: Iterable[Token], token_type: str) -> list[str]:
    return [info for kind, info in tokens if kind == token_type]


class ChatLogic:
    """Owns the answer graph and passes messages between the user and the chatbot."""

    def __init__(
        self,
        on_response: Optional[Callable[[str], None]] = None,
        image_path: Optional[str] = DEFAULT_IMAGE_PATH,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.on_response = on_response
        self.image_path = image_path
        self.rng = rng
        self.nodes: dict[int, GraphNode] = {}
        self.root_node: Optional[GraphNode] = None
        self.chatbot: Optional[ChatBot] = None

    @property
    def chatbot_image(self) -> Optional[str]:
        """Image path of the chatbot currently in charge."""
        if self.chatbot is None:
            raise RuntimeError("no chatbot has been placed yet")
        return self.chatbot.image_path

    def load_answer_graph(self, path: Union[str, PathLike]) -> None:
        """Read the answer graph from `path` and place a new chatbot on its root node."""
        with open(path, encoding="utf-8") as file:
            for line in file:
                self._process_line(parse_tokens(line.rstrip("\r\n")))

        root: Optional[GraphNode] = None
        for node in self.nodes.values():
            if node.parent_edges:
                continue
            if root is None:
                root = node
            else:
                logger.error("Multiple root nodes detected")
        if root is None:
            raise ValueError(f"answer graph in {path} has no root node")

        self.root_node = root
        chatbot = ChatBot(self.image_path, chat_logic=self, root_node=root, rng=self.rng)
        root.move_chatbot_here(chatbot)

    def _process_line(self, tokens: list[Token]) -> None:
        element_type = _first(tokens, "TYPE")
        if element_type is None:
            return
        id_text = _first(tokens, "ID")
        if id_text is None:
            logger.warning("ID missing. Line is ignored!")
            return
        element_id = int(id_text)

        if element_type == "NODE":
            if element_id not in self.nodes:
                node = GraphNode(element_id)
                for answer in _all(tokens, "ANSWER"):
                    node.add_answer(answer)
                self.nodes[element_id] = node
        elif element_type == "EDGE":
            parent_text = _first(tokens, "PARENT")
            child_text = _first(tokens, "CHILD")
            if parent_text is None or child_text is None:
                return
            parent = self._node(int(parent_text))
            child = self._node(int(child_text))
            edge = GraphEdge(element_id, parent, child)
            for keyword in _all(tokens, "KEYWORD"):
                edge.add_keyword(keyword)
            child.add_parent_edge(edge)
            parent.add_child_edge(edge)

    def _node(self, node_id: int) -> GraphNode:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise ValueError(f"edge refers to unknown node {node_id}") from None

    def send_message_to_chatbot(self, message: str) -> None:
        """Pass a user message on to the chatbot."""
        if self.chatbot is None:
            raise RuntimeError("no answer graph has been loaded")
        self.chatbot.receive_message(message)

    def send_message_to_user(self, message: str) -> None:
        """Pass a chatbot answer on to the user."""
        if self.on_response is not None:
            self.on_response(message)