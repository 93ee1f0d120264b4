"""
# Delegation scopes and the mixins that grant them.

# &InstanceDelegation installs forwarding methods shared by the instances of a class, and
# &SingleDelegation installs them onto one object. &Forwardable and &SingleForwardable
# expose the scopes' operations on subclasses.

#!syntax/python
	class Queue(Forwardable):
		def __init__(self):
			self.q = []

	Queue.define_delegator('q', 'append', 'enq')
	Queue.define_delegators('q', 'pop', 'clear', '__len__')
"""
import types
import inspect
import collections.abc

from . import core

# Names never installed by batch definitions; object identity and attribute dispatch.
reserved = frozenset({
	'__class__',
	'__getattribute__',
})

class Scope(object):
	"""
	# Base class for scopes that install forwarding methods onto an &owner.
	"""
	__slots__ = ('owner',)

	def __init__(self, owner):
		self.owner = owner

	def __repr__(self):
		return "%s(%r)" % (self.__class__.__name__, self.owner)

	def install(self, alias:str, function):
		"""
		# Store &function on the &owner as &alias.
		"""
		raise NotImplementedError("scope did not implement install")

	def define_delegator(self, accessor, method, alias=None) -> str:
		"""
		# Define &alias as a method forwarding calls to &method of the object
		# identified by &accessor. Returns the name of the installed method.

		# &accessor may name a method of the owner, an attribute of the receiver,
		# or a binding in the calling module, optionally followed by dotted attributes.
		"""
		f = core.build(self.owner, accessor, method, alias, skip=(__name__,))
		alias = f.__delegation__.alias
		self.install(alias, f)
		return alias

	def define_delegators(self, accessor, *methods):
		"""
		# Define each of &methods as a forwarding method without renaming.
		# Names present in &reserved are skipped.
		"""
		for method in methods:
			if str(method) in reserved:
				continue
			self.define_delegator(accessor, method)

	def delegate(self, mapping):
		"""
		# Define forwarding methods from a mapping of method names, or iterables of
		# method names, to accessors.

		#!syntax/python
			scope.delegate({'keys': 'table', ('get', '__len__'): 'table'})
		"""
		for methods, accessor in mapping.items():
			if isinstance(methods, str) or not isinstance(methods, collections.abc.Iterable):
				self.define_delegator(accessor, methods)
			else:
				for method in methods:
					self.define_delegator(accessor, method)

class InstanceDelegation(Scope):
	"""
	# Forwarding methods resolved against each instance of a class.

	# When the owner is not a class, the methods are bound to the owner alone.
	# Special method aliases bound this way are callable by name, but operators such as
	# `len(obj)` look special methods up on the type and do not consult them.
	"""
	__slots__ = ()

	def install(self, alias, function, MethodType=types.MethodType):
		if isinstance(self.owner, type):
			setattr(self.owner, alias, function)
		else:
			setattr(self.owner, alias, MethodType(function, self.owner))

class SingleDelegation(Scope):
	"""
	# Forwarding methods resolved against the owner itself.

	# A class owner receives a &classmethod; other owners receive a bound method.
	# Special method aliases bound to a non-class owner are callable by name, but operators
	# such as `len(obj)` look special methods up on the type and do not consult them.
	"""
	__slots__ = ()

	def install(self, alias, function, MethodType=types.MethodType):
		if isinstance(self.owner, type):
			setattr(self.owner, alias, classmethod(function))
		else:
			setattr(self.owner, alias, MethodType(function, self.owner))

class hybrid(object):
	"""
	# Method descriptor binding to the instance when accessed through one,
	# and to the class otherwise.
	"""
	__slots__ = ('__wrapped__',)

	def __init__(self, function):
		self.__wrapped__ = function

	def __get__(self, instance, Class=None, MethodType=types.MethodType):
		if instance is None:
			return MethodType(self.__wrapped__, Class)
		return MethodType(self.__wrapped__, instance)

class Forwardable(object):
	"""
	# Mixin granting instance delegation.

	# Accessed through the class, definitions apply to all instances.
	# Accessed through an instance, definitions apply to that instance alone.
	"""
	__slots__ = ()

	@hybrid
	def instance_delegate(self, mapping):
		return InstanceDelegation(self).delegate(mapping)

	@hybrid
	def define_instance_delegators(self, accessor, *methods):
		return InstanceDelegation(self).define_delegators(accessor, *methods)

	@hybrid
	def define_instance_delegator(self, accessor, method, alias=None):
		return InstanceDelegation(self).define_delegator(accessor, method, alias)

	delegate = instance_delegate
	define_delegators = define_instance_delegators
	define_delegator = define_instance_delegator

class SingleForwardable(object):
	"""
	# Mixin granting single object delegation.

	# Accessed through the class, the forwarding methods resolve against the class.
	# Accessed through an instance, they resolve against that instance.
	"""
	__slots__ = ()

	@hybrid
	def single_delegate(self, mapping):
		return SingleDelegation(self).delegate(mapping)

	@hybrid
	def define_single_delegators(self, accessor, *methods):
		return SingleDelegation(self).define_delegators(accessor, *methods)

	@hybrid
	def define_single_delegator(self, accessor, method, alias=None):
		return SingleDelegation(self).define_delegator(accessor, method, alias)

	delegate = single_delegate
	define_delegators = define_single_delegators
	define_delegator = define_single_delegator

def delegations(subject, missing=object()):
	"""
	# Iterate over the `(alias, spec)` pairs of the forwarding methods visible on &subject.
	"""
	for name in sorted(dir(subject)):
		obj = inspect.getattr_static(subject, name, missing)
		if isinstance(obj, (classmethod, staticmethod, types.MethodType)):
			obj = obj.__func__

		spec = getattr(obj, '__delegation__', None)
		if isinstance(spec, core.Delegation) and spec.alias == name:
			yield (name, spec)
