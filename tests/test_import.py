"""Test if package imports successfully."""

import logging


def test1():
    import rationalsolve
    matrix = rationalsolve.RationalMatrix([[1, 1, 3], [1, -1, 1]])
    rationalsolve.gauss(matrix)
    assert str(rationalsolve.interpret(matrix)) == "x_1 = 2 , i.e. 2\nx_2 = 1 , i.e. 1"


def test_disable_logger(caplog):
    from rationalsolve import DisableLogger, gauss, RationalMatrix
    with caplog.at_level(logging.INFO):
        with DisableLogger():
            gauss(RationalMatrix([[2, 4]]))
    assert caplog.text == ""
