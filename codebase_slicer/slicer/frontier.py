"""BFS frontier: work queue plus pending/visited bookkeeping."""

from __future__ import annotations

from codebase_slicer.models import TraversalContext, WorkItem


class Frontier:
    """Admits each entity at most once and hands work out in FIFO order.

    An entity moves unseen -> pending -> visited and never back. Its depth
    is the depth at which it was first enqueued; a later, shorter path does
    not re-enqueue it.
    """

    def __init__(self, context: TraversalContext):
        self.context = context

    def enqueue(self, name: str, depth: int) -> bool:
        ctx = self.context
        if depth > ctx.max_depth:
            return False
        if name in ctx.visited or name in ctx.pending:
            return False
        ctx.pending.add(name)
        ctx.queue.append(WorkItem(name, depth))
        return True

    def dequeue(self) -> WorkItem | None:
        if not self.context.queue:
            return None
        return self.context.queue.popleft()

    def mark_visited(self, name: str) -> None:
        self.context.pending.discard(name)
        self.context.visited.add(name)

    def is_visited(self, name: str) -> bool:
        return name in self.context.visited

    def __len__(self) -> int:
        return len(self.context.queue)
