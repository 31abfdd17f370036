from collections import deque
from typing import Tuple, Callable, List, Dict

from eightpuzzle.domains.puzzle8 import neighbors as default_neighbors

State = Tuple[int, ...]

def bfs_distances(goal: State,
                  neighbors_fn: Callable[[State], List[Tuple[State,int]]] = default_neighbors) -> Dict[State, int]:
    """Exact move distance from `goal` to every reachable arrangement.
    Slides are reversible, so this is also the distance *to* the goal."""
    dist: Dict[State, int] = {goal: 0}
    q = deque([goal])
    while q:
        s = q.popleft()
        d = dist[s] + 1
        for s2,_ in neighbors_fn(s):
            if s2 not in dist:
                dist[s2] = d
                q.append(s2)
    return dist
