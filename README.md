# membot

A small chatbot that answers by walking an *answer graph*. The graph is read
from a plain text file. Each node holds one or more answers. Each edge between
two nodes carries keywords. When you send a message, the bot compares it with
every keyword on the edges leaving its current node. It then moves along the
edge whose keyword is closest to your message. Closeness is measured as the
Levenshtein edit distance, and case is ignored. When several keywords are
equally close, the first one in file order wins. If the current node has no
outgoing keywords, the bot goes back to the root node. Each time the bot
arrives at a node, it replies with one of that node's answers, picked at
random.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests, install the `test`
extra (`pip install .[test]`) and run `pytest`.

## Answer graph format

Each line of the file describes one node or one edge. A line is a sequence of
`<KEY:value>` tokens:

```
<TYPE:NODE><ID:0><ANSWER:Hello! What would you like to talk about?>
<TYPE:NODE><ID:1><ANSWER:Memory is managed with ownership.><ANSWER:Ask me about ownership.>
<TYPE:EDGE><ID:0><PARENT:0><CHILD:1><KEYWORD:memory><KEYWORD:ownership>
```

Node lines:

- A node line needs `TYPE:NODE` and an integer `ID`.
- It may carry any number of `ANSWER` tokens.
- If a node ID appears a second time, the later line is ignored.

Edge lines:

- An edge line needs `TYPE:EDGE`, an `ID`, a `PARENT` node ID and a `CHILD` node ID.
- It may carry any number of `KEYWORD` tokens.
- The parent and child nodes must already be defined on earlier lines.
  Otherwise loading fails with `ValueError`.
- An edge line without `PARENT` or `CHILD` is ignored.

Other rules:

- A line without a `TYPE` token is ignored.
- A line with a `TYPE` but no `ID` is ignored, and a warning is logged.
- Tokens without a colon are skipped.
- The root is the node that has no incoming edges. If there are several such
  nodes, the first one is used and an error is logged through the
  `membot.chatlogic` logger. If there is none, loading fails with `ValueError`.
- Every node the bot reaches must have at least one answer. Otherwise
  `ValueError` is raised.

## Command line

```
membot path/to/answergraph.txt
```

If no path is given, the command uses `../src/answergraph.txt`.

The bot first prints the root node's answer. After that, every line read from
standard input is sent to the bot, and its reply is printed. The session ends
at end of input.

The exit status is:

| Status | Meaning |
| ------ | ------- |
| 0 | Success |
| 1 | The file cannot be opened, or the graph is invalid. A message is written to standard error. |
| 130 | Interrupted with Ctrl-C. |

`membot.cli.run_chat(graph_path, stdin, stdout)` runs the same loop on any
text streams.

## Library use

```python
import random
from membot.chatlogic import ChatLogic

replies = []
logic = ChatLogic(on_response=replies.append, rng=random.Random(0))
logic.load_answer_graph("answergraph.txt")
logic.send_message_to_chatbot("tell me about memory")
print(replies[-1])
```

`ChatLogic` takes the following arguments:

- `on_response` is called with every answer the bot gives.
- `rng` makes the choice among a node's answers reproducible. Without it, the
  bot seeds its own generator from the current time.
- `image_path` is stored on the bot as its avatar path and is available as
  `logic.chatbot_image`. It defaults to `../images/chatbot.png`.

After loading, `logic.nodes` maps node IDs to nodes, `logic.root_node` is the
root, and `logic.chatbot` is the bot.

The building blocks can also be used on their own:

- `membot.chatbot.levenshtein_distance(s1, s2)` returns the edit distance
  between two strings, ignoring case.
- `membot.chatbot.ChatBot` is the bot itself. It offers `set_current_node(node)`
  and `receive_message(message)`.
- `membot.chatlogic.parse_tokens(line)` splits one line of the graph file into
  `(key, value)` pairs.
- `membot.graph.GraphNode` and `membot.graph.GraphEdge` let you build a graph
  in code:
  - `add_answer` and `add_keyword` add answers to a node and keywords to an edge.
  - `add_parent_edge` and `add_child_edge` connect nodes through edges.
  - `move_chatbot_here` places the bot on a node.
  - `move_chatbot_to` moves the bot from one node to another.

## What it does not do

membot is a terminal and library chatbot only. It has no graphical window, and
it does not load or display any images: the avatar image path is only stored,
never opened. It keeps no chat history beyond what your `on_response` callback
records.