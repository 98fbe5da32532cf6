# adtkit

Integer stack and queue types with a fixed capacity, and two command-line tools
built on them.

## Containers

`adtkit.stack.Stack(capacity=100)` is a last-in, first-out stack.
`adtkit.fifo.BoundedQueue(capacity=100)` is a first-in, first-out queue.
A capacity below 1 raises `ValueError`.

```python
from adtkit.stack import Stack, StackEmptyError, StackFullError
from adtkit.fifo import BoundedQueue, QueueEmptyError, QueueFullError

s = Stack(100)
s.push(10)
s.push(20)
s.peek()        # 20
s.pop()         # 20
len(s)          # 1
s.is_full()     # False

q = BoundedQueue(100)
q.enqueue(1)
q.enqueue(2)
q.front()       # 1
q.back()        # 2
q.dequeue()     # 1
q.is_empty()    # False
```

`Stack.pop()` and `BoundedQueue.dequeue()` return the element they remove.
Pushing onto a full stack raises `StackFullError`; popping or peeking an empty
stack raises `StackEmptyError`. The queue behaves the same way with
`QueueFullError` and `QueueEmptyError`. Both empty-errors are subclasses of
`IndexError`. `clear()` empties either container.

## Postfix calculator

`adtkit.rpn.evaluate(tokens)` evaluates an integer postfix (reverse Polish)
expression given as an iterable of tokens, with `+`, `-`, `*` and `/`, and
returns the value on top of the stack at the end. Division truncates toward
zero; dividing by zero raises `ZeroDivisionError`. A token that does not start
with an integer raises `ValueError`. The working stack holds at most 100 values.

```python
from adtkit.rpn import evaluate

evaluate("3 4 + 2 * 7 /".split())   # 2
evaluate(["-7", "2", "/"])          # -3
```

From the command line, give the number of tokens followed by the tokens on
standard input. Only that many tokens are read. On an error a message is
written to standard error and the exit status is 1.

```
echo "7 3 4 + 2 * 7 /" | adtkit-rpn
```

## Sliding-window sums

`adtkit.window.sliding_sums(values, k)` returns a list with the sum of every
run of `k` consecutive values. If `k` is not between 1 and `len(values)`, the
list is empty. Windows wider than 100 values raise `QueueFullError`.

```python
from adtkit.window import sliding_sums

sliding_sums([1, 2, 3, 4, 5], 3)    # [6, 9, 12]
```

On the command line, give `n` and `k`, then the `n` values, on standard input.
The sums are printed on one line, separated by spaces; nothing is printed when
the input is incomplete or `k` is out of range.

```
echo "5 3 1 2 3 4 5" | adtkit-window
```

## Tests

```
pip install -e ".[test]"
pytest
```