class MeetingsConstants:

    RESOURCE_TYPE = 'meeting'

    class events:
        CREATED_MEETING = 'createdMeeting'
        UPDATED_MEETING = 'updatedMeeting'
        UPDATED_MEETING_MEMBERS = 'updatedMeetingMembers'
        DELETED_MEETING = 'deletedMeeting'
        CREATED_MEETING_MESSAGE = 'createdMeetingMessage'
        DELETED_MEETING_MESSAGE = 'deletedMeetingMessage'

    class search:
        MAPPING_MEETING_MESSAGE = 'meeting_message'
        MAPPING_RESOURCE_MEMBERS = 'resource_members'

    # How many meetings to fetch per iteration when reindexing everything
    REINDEX_BATCH_SIZE = 100
