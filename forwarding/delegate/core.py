"""
# Forwarding function construction.

# &build synthesizes the functions installed by &.library scopes. The produced function
# resolves an &Accessor against its receiver on every call and forwards the arguments
# to the named method of the resolved object.
"""
import sys
import types
import inspect
import keyword
import warnings
import functools
import dataclasses

record = functools.partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)

class PrivateDelegation(RuntimeWarning):
	"""
	# Warning category emitted when a forwarding method reaches a method that is not
	# publicly defined by the resolved target.
	"""

METHOD = 'method'
ATTRIBUTE = 'attribute'
BINDING = 'binding'

def plain(name:str, iskeyword=keyword.iskeyword) -> bool:
	"""
	# Whether &name can be written as a direct attribute reference; `target.name(...)`.
	"""
	return name.isidentifier() and not iskeyword(name)

def private(name:str) -> bool:
	"""
	# Whether &name designates an underscore-private member. Dunder names are public.
	"""
	if name[:1] != '_':
		return False
	return not (len(name) > 4 and name[:2] == '__' and name[-2:] == '__')

routines = (
	types.FunctionType,
	types.BuiltinFunctionType,
	types.MethodType,
	types.MethodDescriptorType,
	types.WrapperDescriptorType,
	types.ClassMethodDescriptorType,
	staticmethod,
	classmethod,
	functools.partialmethod,
)

def routine(obj, isinstance=isinstance) -> bool:
	"""
	# Whether the statically retrieved &obj is a method that can be invoked.
	# Properties and other descriptors are read as attributes.
	"""
	return isinstance(obj, routines)

@record
class Accessor(object):
	"""
	# Descriptor of the expression used to obtain a delegation target.

	# [ Properties ]
	# /kind/
		# One of `'method'`, `'attribute'`, or `'binding'`.
	# /path/
		# The identifiers of the dotted expression. The first is resolved according to
		# &kind; the remainder are read with &getattr from the preceding result.
	# /namespace/
		# The module dictionary that `'binding'` accessors are looked up in.
	"""

	kind: str
	path: tuple
	namespace: dict = dataclasses.field(default=None, compare=False, repr=False)

	@classmethod
	def method(Class, expression):
		return Class(METHOD, tuple(str(expression).split('.')))

	@classmethod
	def attribute(Class, expression):
		return Class(ATTRIBUTE, tuple(str(expression).split('.')))

	@classmethod
	def binding(Class, expression, namespace):
		return Class(BINDING, tuple(str(expression).split('.')), namespace)

	@property
	def literal(self) -> bool:
		"""
		# Whether the accessor is read rather than invoked.
		"""
		return self.kind != METHOD

	def __str__(self):
		if self.kind == METHOD:
			return '.'.join((self.path[0] + '()',) + self.path[1:])
		return '.'.join(self.path)

	def resolve(self, receiver, getattr=getattr):
		"""
		# Resolve the accessor against &receiver.
		"""
		first, *rest = self.path

		if self.kind == METHOD:
			subject = getattr(receiver, first)()
		elif self.kind == ATTRIBUTE:
			subject = getattr(receiver, first)
		else:
			try:
				subject = self.namespace[first]
			except KeyError:
				raise NameError("name %r is not defined" % (first,)) from None

		for x in rest:
			subject = getattr(subject, x)
		return subject

@record
class Delegation(object):
	"""
	# The definition of a single forwarding method.

	# [ Properties ]
	# /accessor/
		# The &Accessor identifying the target.
	# /method/
		# The name of the method invoked on the target.
	# /alias/
		# The name the forwarding method is installed as.
	# /owner/
		# Label of the scope that defined the delegation; used by diagnostics.
	# /site/
		# The `(path, line)` pair of the statement that defined the delegation.
	"""

	accessor: Accessor
	method: str
	alias: str
	owner: str = dataclasses.field(default='', compare=False)
	site: tuple = dataclasses.field(default=('<unknown>', 0), compare=False)

	@property
	def direct(self) -> bool:
		"""
		# Whether calls are dispatched with a direct attribute reference.
		"""
		return plain(self.method)

def origin(skip=(), getframe=sys._getframe):
	"""
	# Identify the first frame outside of this module and the modules named in &skip.

	# Returns the `(path, line)` of the frame and its globals dictionary.
	"""
	names = {__name__}
	names.update(skip)

	f = getframe()
	while f is not None and f.f_globals.get('__name__') in names:
		f = f.f_back

	if f is None:
		return ('<unknown>', 0), {}
	return (f.f_code.co_filename, f.f_lineno), f.f_globals

def label(owner) -> str:
	"""
	# Name of the scope used to identify &owner in diagnostics.
	"""
	if isinstance(owner, type):
		return owner.__qualname__
	if isinstance(owner, types.ModuleType):
		return owner.__name__
	return owner.__class__.__qualname__

def classify(owner, expression, namespace, missing=object()) -> Accessor:
	"""
	# Construct the &Accessor for &expression relative to &owner.

	# The kind is decided once, here, and is not revisited when &owner changes.
	"""
	if isinstance(expression, Accessor):
		return expression

	expression = str(expression)
	first = expression.split('.', 1)[0]
	static = inspect.getattr_static(owner, first, missing)

	if static is not missing and routine(static):
		return Accessor.method(expression)

	# Only capitalized names are bindings unless the owner is a module;
	# lowercase names are instance attributes assigned after definition.
	constant = first[:1].isupper() or isinstance(owner, types.ModuleType)
	if static is missing and constant and first in namespace:
		return Accessor.binding(expression, namespace)

	return Accessor.attribute(expression)

def exposed(target, name, missing=object()) -> bool:
	"""
	# Whether &name is publicly and statically defined by &target.
	"""
	if private(name):
		return False
	return inspect.getattr_static(target, name, missing) is not missing

def build(owner, accessor, method, alias=None, skip=()):
	"""
	# Build the forwarding function for the delegation of &method to &accessor.

	# [ Parameters ]
	# /owner/
		# The class or object that the function will be installed on.
		# Used to classify &accessor and to label diagnostics.
	# /accessor/
		# The accessor expression or an &Accessor instance.
	# /method/
		# The name of the method to call on the resolved target.
	# /alias/
		# The name that the function will be installed as. Defaults to &method.
	# /skip/
		# Module names to ignore when identifying the defining statement.

	# [ Returns ]
	# A function taking the receiver as its first parameter followed by
	# the forwarded arguments.
	"""
	method = str(method)
	alias = method if alias is None else str(alias)

	site, namespace = origin(skip)
	spec = Delegation(classify(owner, accessor, namespace), method, alias, label(owner), site)
	resolve = spec.accessor.resolve

	if spec.direct:
		prefix = "%s.%s at %s:%d forwarding to private method " % ((spec.owner, alias) + site)

		def forward(receiver, /, *args, **kw):
			target = resolve(receiver)
			if exposed(target, method):
				return getattr(target, method)(*args, **kw)

			f = getattr(target, method)
			warnings.warn(
				prefix + target.__class__.__qualname__ + '.' + method,
				PrivateDelegation, stacklevel=2
			)
			return f(*args, **kw)
	else:
		def forward(receiver, /, *args, **kw):
			return getattr(resolve(receiver), method)(*args, **kw)

	forward.__name__ = alias
	forward.__qualname__ = spec.owner + '.' + alias
	forward.__doc__ = "# Forward to `%s.%s`." % (spec.accessor, method)
	forward.__delegation__ = spec
	return forward
