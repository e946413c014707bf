class AlgebraError(Exception):
    pass

class ConstructionError(AlgebraError, ValueError):
    pass

class DivideByZero(AlgebraError, ZeroDivisionError):
    pass
