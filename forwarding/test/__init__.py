"""
# Test harness for the forwarding projects.

# Test modules define functions prefixed with `test_` that accept a &core.Test instance
# and contend expectations with the true division operator.
"""
__factor_type__ = 'project'
