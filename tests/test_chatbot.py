import random

import pytest

from membot.chatbot import ChatBot, levenshtein_distance
from membot.graph import GraphEdge, GraphNode


class FakeLogic:
    def __init__(self):
        self.chatbot = None
        self.messages = []

    def send_message_to_user(self, message):
        self.messages.append(message)


def connect(parent, child, edge_id, *keywords):
    edge = GraphEdge(edge_id, parent, child)
    for keyword in keywords:
        edge.add_keyword(keyword)
    parent.add_child_edge(edge)
    child.add_parent_edge(edge)
    return edge


def build_graph():
    root = GraphNode(0)
    root.add_answer("welcome")
    weather = GraphNode(1)
    weather.add_answer("it is sunny")
    food = GraphNode(2)
    food.add_answer("pizza please")
    connect(root, weather, 100, "weather", "rain")
    connect(root, food, 101, "food", "hungry")
    return root, weather, food


def start_bot(root):
    logic = FakeLogic()
    bot = ChatBot("chatbot.png", logic, root, random.Random(0))
    root.move_chatbot_here(bot)
    return bot, logic


def test_levenshtein_worked_example():
    assert levenshtein_distance("kitten", "sitting") == 3


def test_levenshtein_single_substitution():
    assert levenshtein_distance("abc", "abd") == 1


@pytest.mark.parametrize("text", ["", "a", "hello", "Membot"])
def test_levenshtein_identity(text):
    assert levenshtein_distance(text, text) == 0


def test_levenshtein_ignores_case():
    assert levenshtein_distance("Hello World", "hELLO wORLD") == 0


@pytest.mark.parametrize("text", ["", "abc", "longer text"])
def test_levenshtein_empty_side(text):
    assert levenshtein_distance("", text) == len(text)
    assert levenshtein_distance(text, "") == len(text)


@pytest.mark.parametrize(
    "a,b,c",
    [("weather", "whether", "feather"), ("food", "good", "mood"), ("abc", "", "xyz")],
)
def test_levenshtein_symmetry_and_triangle(a, b, c):
    assert levenshtein_distance(a, b) == levenshtein_distance(b, a)
    assert levenshtein_distance(a, c) <= levenshtein_distance(a, b) + levenshtein_distance(b, c)


def test_levenshtein_bounded_by_longer_length():
    assert levenshtein_distance("short", "much longer string") <= len("much longer string")


def test_placing_bot_sends_root_answer():
    root, _, _ = build_graph()
    bot, logic = start_bot(root)
    assert bot.current_node is root
    assert logic.messages == ["welcome"]
    assert logic.chatbot is bot


def test_receive_message_follows_closest_keyword():
    root, weather, food = build_graph()
    bot, logic = start_bot(root)
    bot.receive_message("hungri")
    assert bot.current_node is food
    assert food.chatbot is bot
    assert root.chatbot is None
    assert logic.messages == ["welcome", "pizza please"]


def test_receive_message_matches_any_keyword_of_edge():
    root, weather, _ = build_graph()
    bot, _ = start_bot(root)
    bot.receive_message("RAIN")
    assert bot.current_node is weather


def test_leaf_node_returns_to_root():
    root, weather, _ = build_graph()
    bot, logic = start_bot(root)
    bot.receive_message("weather")
    bot.receive_message("anything at all")
    assert bot.current_node is root
    assert root.chatbot is bot
    assert weather.chatbot is None
    assert logic.messages == ["welcome", "it is sunny", "welcome"]


def test_answer_chosen_from_node_answers():
    node = GraphNode(7)
    for answer in ("one", "two", "three"):
        node.add_answer(answer)
    logic = FakeLogic()
    bot = ChatBot(None, logic, node, random.Random(42))
    for _ in range(10):
        bot.set_current_node(node)
    assert set(logic.messages) <= set(node.answers)
    assert len(logic.messages) == 10


def test_node_without_answers_raises():
    node = GraphNode(9)
    bot = ChatBot(None, FakeLogic(), node, random.Random(1))
    with pytest.raises(ValueError):
        bot.set_current_node(node)


def test_receive_before_placement_raises():
    bot = ChatBot(None, FakeLogic(), None, random.Random(1))
    with pytest.raises(RuntimeError):
        bot.receive_message("hello")


def test_no_edges_and_no_root_raises():
    node = GraphNode(4)
    node.add_answer("alone")
    bot = ChatBot(None, FakeLogic(), None, random.Random(1))
    node.move_chatbot_here(bot)
    with pytest.raises(RuntimeError):
        bot.receive_message("hello")
    assert node.chatbot is bot