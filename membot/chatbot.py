"""The chatbot that walks the answer graph following the user's messages."""

from __future__ import annotations

import random
import time
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from membot.graph import GraphNode


def levenshtein_distance(s1: str, s2: str) -> int:
    """Case-insensitive Levenshtein distance between two strings."""
    a = s1.upper()
    b = s2.upper()
    if not a:
        return len(b)
    if not b:
        return len(a)

    costs = list(range(len(b) + 1))
    for i, ch1 in enumerate(a):
        corner = costs[0]
        costs[0] = i + 1
        for j, ch2 in enumerate(b):
            upper = costs[j + 1]
            if ch1 == ch2:
                costs[j + 1] = corner
            else:
                costs[j + 1] = min(costs[j], upper, corner) + 1
            corner = upper
    return costs[-1]


class ChatBot:
    """Chatbot that answers from the node it sits on and moves along keyword edges."""

    def __init__(
        self,
        image_path: Optional[str] = None,
        chat_logic: Any = None,
        root_node: Optional["GraphNode"] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.image_path = image_path
        self.chat_logic = chat_logic
        self.root_node = root_node
        self.current_node: Optional["GraphNode"] = None
        self.rng = rng if rng is not None else random.Random(int(time.time()))

    def set_current_node(self, node: "GraphNode") -> None:
        """Make `node` current and send one of its answers to the user."""
        if not node.answers:
            raise ValueError(f"node {node.id} has no answers")
        self.current_node = node
        answer = self.rng.choice(node.answers)
        if self.chat_logic is not None:
            self.chat_logic.send_message_to_user(answer)

    def receive_message(self, message: str) -> None:
        """Move to the child node whose keyword is closest to `message`, or back to the root."""
        if self.current_node is None:
            raise RuntimeError("chatbot is not placed on any node")

        candidates = (
            (levenshtein_distance(keyword, message), edge)
            for edge in self.current_node.child_edges
            for keyword in edge.keywords
        )
        best = min(candidates, key=lambda pair: pair[0], default=None)
        new_node = best[1].child if best is not None else self.root_node
        if new_node is None:
            raise RuntimeError("no matching edge and no root node to return to")

        self.current_node.move_chatbot_to(new_node)