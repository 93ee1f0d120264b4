#: Project name.
name = 'delegate'
abstract = 'forwarding methods resolved against attributes, methods, and module bindings'
icon = '📨'

#: IRI based project identity.
identity = 'http://fault.io/src/python/forwarding.delegate'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

#: Version tuple: (major, minor, patch)
version_info = (0, 1, 0)

#: The version string.
version = '.'.join(map(str, version_info))
