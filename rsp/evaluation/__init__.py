from rsp.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
