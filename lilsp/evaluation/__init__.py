from lilsp.evaluation.evaluator import evaluate, evaluate_sexpr
from lilsp.evaluation.apply import apply

__all__ = ["evaluate", "evaluate_sexpr", "apply"]
