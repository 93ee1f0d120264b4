"""
# Method delegation projects.

# [ Delegation ]

# The &.delegate package defines forwarding methods on classes and objects that pass
# calls on to an object identified by an attribute, a method, or a module binding.

# [ Testing ]

# The &.test package provides the harness used by the projects' test modules.
"""
__factor_type__ = 'context'
__canonical__ = 'forwarding' # canonical package name
