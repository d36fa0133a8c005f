"""oae_bbb - Big Blue Button meetings for the Apereo OAE platform

The plugin signs Big Blue Button API calls for meetings (oae_bbb.api)
and keeps the platform's search index in step with meeting events
(oae_bbb.search).  The host platform loads it and calls init().

License: Educational Community License, Version 2.0 (ECL-2.0)
"""

from .api import get_join_meeting_url
from .errors import BBBError, BBBConfigError, BBBResponseError
from .search import MeetingsSearch

def init(search_api, messagebox_search, tenants_api, meetings_api, meetings_dao):
    r"""
    Entry point for the host's module loader.  Registers the meeting
    search hooks and returns the MeetingsSearch doing the work.
    """
    meetings_search = MeetingsSearch(search_api, messagebox_search, tenants_api, meetings_api, meetings_dao)
    meetings_search.register()
    meetings_search.init()
    return meetings_search
