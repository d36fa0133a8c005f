#
# Resource ids on the platform look like "m:cam:abc123": the
# resource type, the alias of the tenant that owns it, and the
# resource's id within that tenant.

import collections

Resource = collections.namedtuple('Resource', ['resourceType', 'tenantAlias', 'resourceId'])

def get_resource_from_id(id):
    parts = id.split(':', 2)
    if len(parts) != 3:
        raise ValueError(f'Malformed resource id: {id!r}')
    return Resource(*parts)
