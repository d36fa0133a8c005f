#
# Per-tenant BigBlueButton configuration.
#
# Settings are read from a Java-style properties file, the same format
# the BigBlueButton server uses for its own bigbluebutton.properties.
# Each key is <tenantAlias>.<feature>.<element>, falling back to
# <feature>.<element> for values shared by every tenant:
#
#   bbb.endpoint=https://bbb.example.org/bigbluebutton/
#   bbb.secret=0123456789abcdef
#   cam.bbb.endpoint=https://bbb.cam.example.org/bigbluebutton/
#   cam.bbb.secret=fedcba9876543210
#   cam.bbb.checksumType=sha256

import os
import logging
import collections

import pyjavaproperties

from .errors import BBBConfigError

log = logging.getLogger(__name__)

PROP_FILE = "/etc/oae/bbb.properties"

CHECKSUM_TYPES = ('sha1', 'sha256', 'sha384', 'sha512')

BBBSettings = collections.namedtuple('BBBSettings', ['endpoint', 'secret', 'checksum_type'])

def config_file():
    return os.environ.get('OAE_BBB_CONFIG', PROP_FILE)

def properties():
    if not hasattr(properties, 'retval'):
        retval = pyjavaproperties.Properties()
        filename = config_file()
        log.debug('Loading BigBlueButton configuration from %s', filename)
        with open(filename) as file:
            retval.load(file)
        properties.retval = retval
    return properties.retval

def reset():
    r"""
    Forget the cached properties, so that the next lookup re-reads
    the configuration file.
    """
    if hasattr(properties, 'retval'):
        del properties.retval

def _lookup(key):
    # missing keys come back as None
    value = properties()[key]
    return (value or '').strip() or None

def get_value(tenant_alias, feature, element, default=None):
    r"""
    Look up `feature`.`element` for `tenant_alias`, first as a tenant
    specific key and then as a global one.  Returns `default` if
    neither is set.
    """
    for key in (f'{tenant_alias}.{feature}.{element}', f'{feature}.{element}'):
        value = _lookup(key)
        if value is not None:
            return value
    return default

def verified_endpoint(endpoint):
    # API URLs are built as endpoint + 'api/' + action
    if not endpoint.endswith('/'):
        endpoint += '/'
    return endpoint

def get_config(tenant_alias):
    endpoint = get_value(tenant_alias, 'bbb', 'endpoint')
    if not endpoint:
        raise BBBConfigError(tenant_alias, 'endpoint')
    secret = get_value(tenant_alias, 'bbb', 'secret')
    if not secret:
        raise BBBConfigError(tenant_alias, 'secret')
    checksum_type = get_value(tenant_alias, 'bbb', 'checksumType', 'sha1').lower()
    if checksum_type not in CHECKSUM_TYPES:
        raise BBBConfigError(tenant_alias, 'checksumType')
    return BBBSettings(verified_endpoint(endpoint), secret, checksum_type)
