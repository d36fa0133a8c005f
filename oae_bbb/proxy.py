#
# Make a single call against the Big Blue Button REST API and hand
# back the <response> document as a dictionary.
#
# A FAILED returncode is not an error here; it comes back like any
# other response and the caller decides what to do with it (for
# example, messageKey 'notFound' from getMeetingInfo just means the
# meeting hasn't been created yet).  Errors from the HTTP request or
# the XML parse are raised unmodified.

import logging

import requests

from lxml import etree

log = logging.getLogger(__name__)

# seconds
DEFAULT_TIMEOUT = 10

def element_to_value(element):
    r"""
    Convert an XML element to a string (if it has no children) or a
    dictionary.  Child tags that appear more than once, like the
    <attendee> elements in a meeting's <attendees>, become lists.
    """
    children = [child for child in element if isinstance(child.tag, str)]
    if not children:
        return (element.text or '').strip()
    result = {}
    for child in children:
        value = element_to_value(child)
        if child.tag in result:
            if not isinstance(result[child.tag], list):
                result[child.tag] = [result[child.tag]]
            result[child.tag].append(value)
        else:
            result[child.tag] = value
    return result

def response_to_dict(xml):
    if xml.tag != 'response':
        xml = xml.find('.//response')
        if xml is None:
            return {}
    value = element_to_value(xml)
    return value if isinstance(value, dict) else {}

def execute_bbb_call(url, timeout=DEFAULT_TIMEOUT):
    r"""
    GET `url` (a signed API URL), parse the XML reply, and return the
    <response> element as a dictionary.
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    xml = etree.fromstring(response.content)
    result = response_to_dict(xml)
    log.debug('%s -> %s', url.split('?')[0], result)
    return result
