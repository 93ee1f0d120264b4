"""
# Method forwarding by reference to another object's interface.

# [ Modules ]

# /&.core/
	# Construction of forwarding functions and accessor resolution.
# /&.library/
	# Instance and single object delegation scopes and their mixins.
"""
__factor_type__ = 'project'
