#
# The shapes this plugin receives from the host platform.
#
# The host is free to pass its own objects instead; only the
# attributes used here are ever read.

class Tenant:
    def __init__(self, alias, display_name=None, host=None):
        self.alias = alias
        self.display_name = display_name or alias
        self.host = host

    def compact(self):
        return {
            'alias': self.alias,
            'displayName': self.display_name
        }

class User:
    def __init__(self, id, display_name, tenant=None):
        self.id = id
        self.display_name = display_name
        self.tenant = tenant

class Context:
    r"""
    Who is making the request (`user`, None if anonymous) and on which
    tenant.
    """
    def __init__(self, tenant, user=None):
        self.tenant = tenant
        self.user = user

class Meeting:
    def __init__(self, id, tenant, display_name, description=None, visibility='public',
                 last_modified=None):
        self.id = id
        self.tenant = tenant
        self.display_name = display_name
        self.description = description
        self.visibility = visibility
        self.last_modified = last_modified
