import types

from .. import core
from .. import engine as module

def sample():
	m = types.ModuleType('sample')

	def test_second(test):
		test/1 == 1
	def test_first(test):
		test/(1, 2) == (1, 2)
	def helper(test):
		test.fail("not a test")

	m.test_second = test_second
	m.test_first = test_first
	m.helper = helper
	return m

def test_gather(test):
	# Source order, not name order.
	test/module.gather(sample()) == ['test_second', 'test_first']

def test_execute(test):
	m = sample()
	module.execute(m)

	def test_failure(test):
		test/1 == 2
	m.test_failure = test_failure

	# Fates are not trapped by contentions.
	try:
		module.execute(m)
	except core.Fate as fate:
		test/fate.negative == True
		test.isinstance(fate.__cause__, core.Absurdity)
		test/str(fate.__cause__) == "1 == 2"
	else:
		test.fail("failure was not raised")

def test_Contention_inverse(test):
	t = core.Test('inverse', None)
	test/core.Absurdity ^ (lambda: t//1 == 1)
	test/(t//1 == 2) == True
	test/(t/None % None) == True

if __name__ == '__main__':
	from .. import engine; import sys
	engine.execute(sys.modules[__name__])
