#
# Keep the search index in step with meetings.
#
# Meetings are indexed as 'meeting' resource documents, with two kinds
# of child documents: the meeting's members ('resource_members') and
# the messages posted to the meeting ('meeting_message').
#
# Nothing here talks to the search engine directly.  The host platform
# hands us its services when the plugin is loaded:
#
#   search_api          register_search_document_producer(), register_search_document_transformer(),
#                       register_reindex_all_handler(), post_index_task(), post_delete_task()
#   messagebox_search   register_message_search_document(), create_message_search_documents(),
#                       create_all_message_search_documents(), delete_message_search_document()
#   tenants_api         get_tenant()
#   meetings_api        on(event, handler)
#   meetings_dao        get_meetings_by_id(), iterate_all()
#
# Document producers return an (errors, documents) pair; errors is None
# when everything could be produced.

import logging

from .constants import MeetingsConstants
from .util import get_resource_from_id

log = logging.getLogger(__name__)

RESOURCE_TYPE = MeetingsConstants.RESOURCE_TYPE
MAPPING_MEETING_MESSAGE = MeetingsConstants.search.MAPPING_MEETING_MESSAGE
MAPPING_RESOURCE_MEMBERS = MeetingsConstants.search.MAPPING_RESOURCE_MEMBERS

def produce_meeting_search_document(meeting):
    r"""
    Given a meeting, produce its resource search document.
    """

    # Full-text search on name and description, but only if they're specified
    full_text = ' '.join(s for s in (meeting.display_name, meeting.description) if s)

    doc = {
        'resourceType': RESOURCE_TYPE,
        'id': meeting.id,
        'tenantAlias': meeting.tenant.alias,
        'displayName': meeting.display_name,
        'visibility': meeting.visibility,
        'q_high': meeting.display_name,
        'q_low': full_text,
        'sort': meeting.display_name,
        '_extra': {
            'lastModified': meeting.last_modified
        }
    }

    if meeting.description:
        doc['description'] = meeting.description

    return doc

class MeetingsSearch:

    def __init__(self, search_api, messagebox_search, tenants_api, meetings_api, meetings_dao):
        self.search_api = search_api
        self.messagebox_search = messagebox_search
        self.tenants_api = tenants_api
        self.meetings_api = meetings_api
        self.meetings_dao = meetings_dao

    def register(self):
        r"""
        Hook up the event handlers, the document producer and transformer,
        and the reindex-all handler for meetings.
        """
        events = MeetingsConstants.events
        self.meetings_api.on(events.CREATED_MEETING, self.on_created_meeting)
        self.meetings_api.on(events.UPDATED_MEETING, self.on_updated_meeting)
        self.meetings_api.on(events.UPDATED_MEETING_MEMBERS, self.on_updated_meeting_members)
        self.meetings_api.on(events.DELETED_MEETING, self.on_deleted_meeting)
        self.meetings_api.on(events.CREATED_MEETING_MESSAGE, self.on_created_meeting_message)
        self.meetings_api.on(events.DELETED_MEETING_MESSAGE, self.on_deleted_meeting_message)

        self.search_api.register_search_document_producer(RESOURCE_TYPE, self.produce_meeting_search_documents)
        self.search_api.register_search_document_transformer(RESOURCE_TYPE, self.transform_meeting_documents)
        self.search_api.register_reindex_all_handler(RESOURCE_TYPE, self.reindex_all)

    def init(self):
        r"""
        Register the meeting message child document with the message box
        search, so messages posted to a meeting are searchable.
        """
        return self.messagebox_search.register_message_search_document(
            MAPPING_MEETING_MESSAGE, [RESOURCE_TYPE],
            lambda resources: self.produce_meeting_message_documents(list(resources)))

    # Indexing tasks

    def on_created_meeting(self, ctx, meeting, members=None):
        self.search_api.post_index_task(RESOURCE_TYPE, [{'id': meeting.id}], {
            'resource': True,
            'children': {
                MAPPING_RESOURCE_MEMBERS: True
            }
        })

    def on_updated_meeting(self, ctx, meeting, updated_meeting=None):
        self.search_api.post_index_task(RESOURCE_TYPE, [{'id': meeting.id}], {
            'resource': True
        })

    def on_updated_meeting_members(self, ctx, meeting, *args):
        self.search_api.post_index_task(RESOURCE_TYPE, [{'id': meeting.id}], {
            'children': {
                MAPPING_RESOURCE_MEMBERS: True
            }
        })

    def on_deleted_meeting(self, ctx, meeting):
        # cascades to the child documents
        self.search_api.post_delete_task(meeting.id)

    def on_created_meeting_message(self, ctx, message, meeting):
        resource = {
            'id': meeting.id,
            'messages': [message]
        }
        self.search_api.post_index_task(RESOURCE_TYPE, [resource], {
            'children': {
                MAPPING_MEETING_MESSAGE: True
            }
        })

    def on_deleted_meeting_message(self, ctx, message, meeting, delete_type=None):
        return self.messagebox_search.delete_message_search_document(MAPPING_MEETING_MESSAGE, meeting.id, message)

    # Document producers

    def produce_meeting_message_documents(self, resources):
        r"""
        Produce the message child documents for a list of meeting
        resources.  A resource carrying 'messages' only gets documents
        for those messages; any other resource gets documents for every
        message in the meeting's message box.
        """
        documents = []
        errors = []
        for resource in resources:
            if resource.get('messages'):
                documents.extend(self.messagebox_search.create_message_search_documents(
                    MAPPING_MEETING_MESSAGE, resource['id'], resource['messages']))
                continue

            # The meeting's message box has the same id as the meeting
            try:
                documents.extend(self.messagebox_search.create_all_message_search_documents(
                    MAPPING_MEETING_MESSAGE, resource['id'], resource['id']))
            except Exception as err:
                log.warning('Could not produce message documents for %s: %s', resource['id'], err)
                errors.append(err)

        return (errors or None, documents)

    def get_meetings(self, resources):
        r"""
        Get the meetings for a list of resources to index.  Resources that
        already carry their meeting aren't looked up again; meetings that
        have since been deleted come back from the DAO as None.
        """
        meetings = []
        meeting_ids = []
        for resource in resources:
            if resource.get('meeting'):
                meetings.append(resource['meeting'])
            else:
                meeting_ids.append(resource['id'])

        if meeting_ids:
            meetings.extend(self.meetings_dao.get_meetings_by_id(meeting_ids))
        return meetings

    def produce_meeting_search_documents(self, resources):
        try:
            meetings = self.get_meetings(resources)
        except Exception as err:
            log.error('Could not fetch meetings to index: %s', err)
            return ([err], None)

        meetings = [meeting for meeting in meetings if meeting]
        return (None, [produce_meeting_search_document(meeting) for meeting in meetings])

    # Document transformers

    def transform_meeting_documents(self, ctx, docs):
        r"""
        Turn meeting documents, as they come back from the search engine,
        into results for display: {docId: doc} in, {docId: result} out.

        The search engine wraps every field value in a list.  We unwrap
        them, keep just 'lastModified' from the '_extra' field, and add
        the compact tenant and the meeting's profile path.
        """
        transformed_docs = {}
        for doc_id, doc in docs.items():
            fields = doc.get('fields', {})
            extra = _first(fields.get('_extra')) or {}

            result = {'id': doc_id}
            for name, value in fields.items():
                result[name] = _first(value)

            if 'lastModified' in extra:
                result['lastModified'] = extra['lastModified']

            tenant_alias = result['tenantAlias']
            result['tenant'] = self.tenants_api.get_tenant(tenant_alias).compact()
            result['profilePath'] = '/meeting/{}/{}'.format(tenant_alias, get_resource_from_id(result['id']).resourceId)

            transformed_docs[doc_id] = result

        return transformed_docs

    # Reindex all

    def reindex_all(self):
        r"""
        Fire an index task for every meeting, one task per batch of
        meetings read from the DAO.
        """
        for meeting_rows in self.meetings_dao.iterate_all(['id'], MeetingsConstants.REINDEX_BATCH_SIZE):
            meeting_resources = [{'id': row['id']} for row in meeting_rows]
            log.info('Firing re-indexing task for %s meetings.', len(meeting_resources))
            self.search_api.post_index_task(RESOURCE_TYPE, meeting_resources, {'resource': True, 'children': True})

def _first(value):
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value
