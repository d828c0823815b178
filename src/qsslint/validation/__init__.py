from qsslint.validation.validator import RuleFunc, validate

__all__ = ["RuleFunc", "validate"]
