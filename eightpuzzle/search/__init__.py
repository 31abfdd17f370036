from eightpuzzle.search.a_star import AStarSolver, a_star
from eightpuzzle.search.state import State
from eightpuzzle.search.frontier import Frontier, SeenSet
