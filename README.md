# structlab

Classic data structures and algorithms in plain Python, together with a
small event-driven service that moves JSON events through a shared
in-process queue.

There are no runtime dependencies. The package needs Python 3.10 or newer.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                    | Contents                                                                 |
|---------------------------|--------------------------------------------------------------------------|
| `structlab.stack`         | `ArrayStack`, a stack with a fixed capacity (1000 by default)            |
| `structlab.linked_list`   | `Node`, `has_cycle`, `from_values`, `SinglyLinkedList`, `DoublyLinkedList` |
| `structlab.linked_queue`  | `LinkedQueue`, a FIFO queue built from linked nodes                      |
| `structlab.vector`        | `DynamicVector`, a sequence whose capacity doubles when it is full       |
| `structlab.hashing`       | `ChainedHashMap` and `ChainedHashSet`, which resolve collisions by chaining |
| `structlab.tries`         | `ArrayTrie` (lower-case a–z only) and `MapTrie` (any characters, with `starts_with`) |
| `structlab.graphs`        | `AdjacencyListGraph`, `lab_matrix`, `format_matrix`, `identify_nodes`, `dijkstra`, `format_distances` |
| `structlab.avl`           | `AVLTree`, a self-balancing binary search tree                           |
| `structlab.bst`           | `BinarySearchTree`, `DegenerateTree`, `linked_binary_search`             |
| `structlab.binary_trees`  | `TreeNode`, `LevelOrderTree`, `depth`, `is_full`, `is_perfect`, `is_perfect_by_levels`, `inorder`, `preorder`, `postorder` |
| `structlab.message_queue` | `MessageQueue`, a thread-safe FIFO of JSON-like event dicts              |
| `structlab.consumers`     | `Consumer`, `KafkaConsumer`, `RabbitMQConsumer`                          |
| `structlab.rest_api`      | `Response` and `RestAPIServer`, an HTTP front end that accepts events    |
| `structlab.github`        | `http_get`, `events_url`, `push_events`, `fetch_github_events`           |
| `structlab.app`           | `build_services` and `main`, which wire the service together             |

## Data structures

```python
from structlab.avl import AVLTree

tree = AVLTree()
for value in (10, 20, 30, 40, 50, 25):
    tree.insert(value)

tree.inorder()    # [10, 20, 25, 30, 40, 50]
tree.preorder()   # [30, 20, 10, 25, 40, 50]
25 in tree        # True
tree.remove(30)
tree.height()
```

```python
from structlab.tries import MapTrie

trie = MapTrie()
for word in ("apple", "app", "apricot"):
    trie.insert(word)

trie.search("apple")      # True
trie.starts_with("apr")   # True
trie.search("appl")       # False
trie.remove("apple")      # True
trie.search("app")        # True
```

```python
from structlab.hashing import ChainedHashSet

numbers = ChainedHashSet(7)
for key in (1, 2, 3, 10, 15):
    numbers.add(key)

3 in numbers    # True
5 in numbers    # False
numbers.remove(10)
numbers.buckets()   # a copy of each bucket's keys
```

Linked lists, the queue, the vector and the stack support `len()`, and all
but the stack support iteration. Linked lists use 1-based positions.
Errors raise exceptions rather than printing messages:

* `ArrayStack.push` on a full stack raises `OverflowError`; `pop` and `peek`
  on an empty stack raise `IndexError`.
* Positions below 1 in the linked lists raise `ValueError`; positions past
  the end, and deleting from an empty list, raise `IndexError`.
* `LinkedQueue.dequeue` and `DynamicVector.pop_back` on an empty container
  raise `IndexError`; `DynamicVector` accepts only non-negative indices.
* `ChainedHashMap.search` raises `KeyError` for a missing key; `delete`
  returns whether a key was removed. A repeated key shadows the older entry.
* `ArrayTrie` raises `ValueError` for any character outside a–z.
* `BinarySearchTree.min`/`max` and `DegenerateTree.min` raise `ValueError`
  on an empty tree. `BinarySearchTree(allow_duplicates=True)` keeps equal
  values in the right subtree; by default they are ignored.

`linked_binary_search(head, value)` runs a binary search over a sorted
chain of `structlab.linked_list.Node` objects (build one with
`from_values`) and returns the matching node or `None`.

## Graphs and shortest paths

`dijkstra(weights, source=0)` takes a square matrix of non-negative edge
weights, where 0 means "no edge", and returns the shortest distance from
`source` to every vertex, with `math.inf` for unreachable ones.
`format_distances` turns the result into a table with vertices named A, B,
C and so on.

`lab_matrix()` returns a labelled weight matrix whose row and column 0 hold
vertex names; `identify_nodes(matrix)` matches the letters A–F to its
vertices by their degrees and neighbours and returns those labels together
with the weight between B and C.

## The event-driven service

Run the whole system with:

```
structlab-eda
```

Options: `--port` (default 8000) for the HTTP API and `--repo` (default
`octocat/Hello-World`) for the repository whose public event feed is
polled. It starts these in their own threads, all sharing one
`MessageQueue`, and runs until interrupted:

* a fetcher that polls the feed every ten seconds and queues each event
  with its `source` set to `github`;
* a `KafkaConsumer` and a `RabbitMQConsumer`, which take turns draining the
  queue every half second and print a report for each event they process;
* a `RestAPIServer` listening on all interfaces.

The HTTP server answers:

* `POST /api/events`: the body must be a JSON object. It is queued, with
  `source` set to `rest_api` if it has none, and the reply is
  `{"status":"success"}`. Anything else gets status 400 and
  `{"status":"error","message":"Invalid JSON"}`.
* `GET /health`: the plain text `OK`.
* `GET /status`: `{"service":"eda-system","status":"running","version":"1.0.0"}`.
* Any other route: status 404 with an empty body.

`RestAPIServer.handle(method, path, body)` answers a request without opening
a socket and returns a `Response`; `make_server(host, port)` builds a
threaded `http.server` server for the same routes.

## What the service does not do

The consumers do not connect to any message broker. `KafkaConsumer` and
`RabbitMQConsumer` only read from the in-process `MessageQueue`; the broker
address, group id, host and port they are given appear in their start-up
banner and nowhere else. Events are not persisted: they live in memory and
are lost when the process stops.