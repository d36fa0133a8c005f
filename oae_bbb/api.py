"""oae_bbb.api - sign and make Big Blue Button API calls for meetings

The API functions defined in https://docs.bigbluebutton.org/dev/api.html
are signed with a checksum: the hex digest of the call name, the query
string and the shared secret concatenated together.  The endpoint and
secret come from the tenant's configuration (see oae_bbb.config).

Examples:

    >>> from oae_bbb import api, model
    >>> api.is_meeting_running('cam', meetingID='abc')
    {'returncode': 'SUCCESS', 'running': 'false'}

    Getting a URL that drops a user into a meeting, creating the
    meeting on the Big Blue Button server first if it isn't running:

    >>> cam = model.Tenant('cam')
    >>> user = model.User('u:cam:ada', 'Ada Lovelace', cam)
    >>> meeting = model.Meeting('m:cam:abc123', cam, 'Weekly sync')
    >>> ctx = model.Context(cam, user)
    >>> api.get_join_meeting_url(ctx, meeting, user)['url']
    'https://bbb.cam.example.org/bigbluebutton/api/join?meetingID=...&checksum=...'

Author: Apereo Foundation
License: Educational Community License, Version 2.0 (ECL-2.0)

"""

import hashlib
import logging
import urllib.parse

from . import config
from .errors import BBBResponseError
from .proxy import execute_bbb_call

log = logging.getLogger(__name__)

def get_query_string_params(params):
    r"""
    Build a query string from a dictionary of parameters, keeping
    their order.  The same string is used in the URL and in the
    checksum, so it must not be re-encoded later.
    """
    return urllib.parse.urlencode(params)

def get_checksum(action, secret, params, checksum_type='sha1'):
    return hashlib.new(checksum_type, (action + params + secret).encode('utf-8')).hexdigest()

def get_bbb_action_url(endpoint, action, secret, params, checksum_type='sha1'):
    r"""
    Construct the URL to make a Big Blue Button REST API call.
    `params` is an already built query string.
    """
    return endpoint + 'api/' + action + '?' + params + '&checksum=' + get_checksum(action, secret, params, checksum_type)

def _sha1(string):
    return hashlib.sha1(string.encode('utf-8')).hexdigest()

def get_meeting_id(meeting_profile, secret):
    # Don't expose platform ids to the Big Blue Button server
    return _sha1(meeting_profile.id + secret)

def get_default_passwords(meeting_id, secret):
    r"""
    Return the (moderatorPW, attendeePW) pair used when we create a
    meeting, derived from the meeting ID so we never have to store
    them.
    """
    return (_sha1(meeting_id[0:8] + secret), _sha1(meeting_id[8:16] + secret))

def _action_url(tenant_alias, action, params):
    settings = config.get_config(tenant_alias)
    query_string = get_query_string_params(params)
    return get_bbb_action_url(settings.endpoint, action, settings.secret, query_string, settings.checksum_type)

def _api_call(tenant_alias, action, params):
    log.debug('Calling %s for tenant %s', action, tenant_alias)
    return execute_bbb_call(_action_url(tenant_alias, action, params))

def create_meeting(tenant_alias, **kwargs):
    return _api_call(tenant_alias, 'create', kwargs)

def get_meeting_info(tenant_alias, **kwargs):
    return _api_call(tenant_alias, 'getMeetingInfo', kwargs)

def is_meeting_running(tenant_alias, **kwargs):
    return _api_call(tenant_alias, 'isMeetingRunning', kwargs)

def end_meeting(tenant_alias, **kwargs):
    return _api_call(tenant_alias, 'end', kwargs)

def get_meetings(tenant_alias):
    return _api_call(tenant_alias, 'getMeetings', {})

def get_recordings(tenant_alias, **kwargs):
    return _api_call(tenant_alias, 'getRecordings', kwargs)

def get_join_meeting_url(ctx, meeting_profile, user):
    r"""
    Return {'url': URL} where URL is a signed Big Blue Button 'join'
    call that puts `user` into the conference for `meeting_profile`
    as a moderator.

    If the Big Blue Button server doesn't know about the meeting yet,
    it is created (with recording enabled) before the URL is signed.
    Errors from either API call propagate to the caller.
    """
    tenant_alias = ctx.tenant.alias
    settings = config.get_config(tenant_alias)

    meeting_id = get_meeting_id(meeting_profile, settings.secret)
    (moderator_pw, attendee_pw) = get_default_passwords(meeting_id, settings.secret)

    meeting_info = get_meeting_info(tenant_alias, meetingID=meeting_id)

    if meeting_info.get('returncode') == 'FAILED' and meeting_info.get('messageKey') == 'notFound':
        log.info('Creating meeting %s for %s on tenant %s', meeting_id, meeting_profile.id, tenant_alias)
        meeting_info = create_meeting(tenant_alias,
                                      meetingID=meeting_id,
                                      name=meeting_profile.display_name,
                                      moderatorPW=moderator_pw,
                                      attendeePW=attendee_pw,
                                      record='true')
        if meeting_info.get('returncode') != 'SUCCESS':
            raise BBBResponseError('create', meeting_info)
    elif meeting_info.get('returncode') != 'SUCCESS':
        raise BBBResponseError('getMeetingInfo', meeting_info)

    # The server's passwords win; an existing meeting may have been
    # created with other ones
    moderator_pw = meeting_info.get('moderatorPW') or moderator_pw

    params = {'meetingID': meeting_id, 'fullName': user.display_name, 'password': moderator_pw}
    join_url = get_bbb_action_url(settings.endpoint, 'join', settings.secret,
                                  get_query_string_params(params), settings.checksum_type)
    return {'url': join_url}
