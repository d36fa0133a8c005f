class BBBError(Exception):
    """Base class for errors raised by the BigBlueButton plugin."""

class BBBConfigError(BBBError):
    r"""
    A tenant has no usable BigBlueButton configuration, typically
    because its endpoint or secret is missing.
    """
    def __init__(self, tenant_alias, element):
        self.tenant_alias = tenant_alias
        self.element = element
        super().__init__(f'No BigBlueButton {element} configured for tenant {tenant_alias}')

class BBBResponseError(BBBError):
    r"""
    The Big Blue Button server answered a call with returncode FAILED
    where the plugin can't carry on.
    """
    def __init__(self, action, response):
        self.action = action
        self.response = response
        self.message_key = response.get('messageKey')
        super().__init__(f"{action} failed: {self.message_key}: {response.get('message')}")
