#
# Command-line access to a tenant's Big Blue Button server, mainly
# for checking that the endpoint and secret are right:
#
#   python3 -m oae_bbb get_meetings TENANT
#   python3 -m oae_bbb meeting_info TENANT MEETING_ID
#   python3 -m oae_bbb is_meeting_running TENANT MEETING_ID
#   python3 -m oae_bbb end TENANT MEETING_ID
#   python3 -m oae_bbb join_url TENANT PLATFORM_MEETING_ID FULL_NAME

import sys
import json
import logging

from . import api
from .model import Context, Meeting, Tenant, User

def print_response(response):
    print(json.dumps(response, indent=2))

def main(argv):
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    if len(argv) < 2:
        print("Usage: python3 -m oae_bbb OPERATION TENANT [ARGS...]")
        return 1

    operation = argv[0]
    tenant_alias = argv[1]
    args = argv[2:]

    if operation == 'get_meetings':
        print_response(api.get_meetings(tenant_alias))
    elif operation == 'meeting_info' and len(args) == 1:
        print_response(api.get_meeting_info(tenant_alias, meetingID=args[0]))
    elif operation == 'is_meeting_running' and len(args) == 1:
        print_response(api.is_meeting_running(tenant_alias, meetingID=args[0]))
    elif operation == 'end' and len(args) == 1:
        print_response(api.end_meeting(tenant_alias, meetingID=args[0]))
    elif operation == 'join_url' and len(args) == 2:
        tenant = Tenant(tenant_alias)
        meeting = Meeting(args[0], tenant, args[0])
        user = User(None, args[1], tenant)
        print(api.get_join_meeting_url(Context(tenant, user), meeting, user)['url'])
    else:
        print("Unknown operation or wrong arguments:", ' '.join(argv))
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
