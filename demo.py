import argparse
from fractions import Fraction

from logzero import logger

from algebra import config
from algebra.gcd import polynomial_gcd
from algebra.monomials import Variable
from algebra.polynomials import Polynomial
from algebra.rational_functions import RationalFunction
from algebra.rings import QQ, IntegersModulo
from algebra.univariate import UnivariatePolynomial, interpolate, resultant
from algebra.univariate_rational_functions import UnivariateRationalFunction

example_usage = '''Example:
python demo.py --debug --variable-name t --logfile demo.log
'''

def parse_args():
    parser = argparse.ArgumentParser(
        description='Exact polynomial and rational function arithmetic',
        epilog=example_usage,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--variable-name', '-n', type=str, default=None,
                        help='stem used to print positional variables')
    parser.add_argument('--logfile', '-l', type=str, default=None)
    parser.add_argument('--debug', action='store_true', default=False)
    return parser.parse_args()

def positional():
    x = Polynomial.variable(QQ, 0)
    y = Polynomial.variable(QQ, 1)
    p = x**2 - y**2
    q = x - y
    logger.info('gcd(%s, %s) = %s', p, q, polynomial_gcd(p, q))

    quotient, remainder = divmod(x**3 + 1, x + 1)
    logger.info('(%s) / (%s) = %s, remainder %s', x**3 + 1, x + 1, quotient, remainder)

    f = RationalFunction(x + 1, x - 1)
    logger.info('(%s)(x_1 = %s) = %s', p, f, p({0: f}))
    logger.info('(%s)(x_1 = 2, x_2 = 1/3) = %s', p, p({0: 2, 1: Fraction(1, 3)}))

def labeled():
    a = Variable('a').as_polynomial(QQ)
    b = Variable('b').as_polynomial(QQ)
    s = RationalFunction(a.one_like(), a) + RationalFunction(a.one_like(), a + 1)
    logger.info('1/a + 1/(a + 1) = %s = %s', s, s.reduced())
    logger.info('gcd(%s, %s) = %s', a**2 * b - b, a * b + b, polynomial_gcd(a**2 * b - b, a * b + b))

def univariate():
    gf = IntegersModulo(7)
    p = UnivariatePolynomial(gf, [6, 0, 1])
    q = UnivariatePolynomial(gf, [1, 1])
    logger.info('over %r: res(%s, %s) = %s', gf, p.to_string('z'), q.to_string('z'), resultant(p, q))
    logger.info('through (0, 1), (1, 3), (2, 7): %s', interpolate(QQ, {0: 1, 1: 3, 2: 7}).to_string('z'))

    f = UnivariateRationalFunction(UnivariatePolynomial(QQ, [-1, 0, 1]), UnivariatePolynomial(QQ, [0, 1]))
    g = UnivariateRationalFunction(UnivariatePolynomial(QQ, [1]), UnivariatePolynomial(QQ, [1, 1]))
    logger.info('f = %s, f(1/(z + 1)) = %s, f(3) = %s', f.to_string('z'), f(g).reduced().to_string('z'), f(3))

if __name__ == '__main__':
    args = parse_args()
    config.configure_logging(args.debug, args.logfile)
    if args.variable_name is not None:
        config.set_variable_name(args.variable_name)
    positional()
    labeled()
    univariate()
