"""Answer graph: nodes carrying answers and edges carrying keywords."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from membot.chatbot import ChatBot


class GraphEdge:
    """A directed edge from a parent node to a child node, labelled with keywords."""

    def __init__(self, edge_id: int, parent: "GraphNode", child: "GraphNode") -> None:
        self.id = edge_id
        self.parent = parent
        self.child = child
        self.keywords: list[str] = []

    def add_keyword(self, keyword: str) -> None:
        """Attach a keyword that leads along this edge."""
        self.keywords.append(keyword)

    def __repr__(self) -> str:
        return f"GraphEdge(id={self.id}, parent={self.parent.id}, child={self.child.id})"


class GraphNode:
    """A node of the answer graph; it owns its outgoing edges and may host the chatbot."""

    def __init__(self, node_id: int) -> None:
        self.id = node_id
        self.answers: list[str] = []
        self.parent_edges: list[GraphEdge] = []
        self.child_edges: list[GraphEdge] = []
        self.chatbot: Optional["ChatBot"] = None

    def __repr__(self) -> str:
        return f"GraphNode(id={self.id})"

    def add_answer(self, answer: str) -> None:
        """Add a possible answer given when the chatbot arrives here."""
        self.answers.append(answer)

    def add_parent_edge(self, edge: GraphEdge) -> None:
        """Record an incoming edge."""
        self.parent_edges.append(edge)

    def add_child_edge(self, edge: GraphEdge) -> None:
        """Record an outgoing edge."""
        self.child_edges.append(edge)

    def move_chatbot_here(self, chatbot: "ChatBot") -> None:
        """Take over the chatbot, register it with its chat logic and let it answer."""
        self.chatbot = chatbot
        chat_logic = getattr(chatbot, "chat_logic", None)
        if chat_logic is not None:
            chat_logic.chatbot = chatbot
        chatbot.set_current_node(self)

    def move_chatbot_to(self, new_node: "GraphNode") -> None:
        """Hand the chatbot hosted here over to another node."""
        if self.chatbot is None:
            raise RuntimeError(f"node {self.id} does not host the chatbot")
        chatbot = self.chatbot
        self.chatbot = None
        new_node.move_chatbot_here(chatbot)