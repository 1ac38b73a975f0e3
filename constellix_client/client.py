#
#
#

import logging
import time
from base64 import b64encode
from hashlib import sha1
from hmac import new as hmac_new

from requests import HTTPError, Session

from . import __version__ as package_version
from .exceptions import (
    ConstellixClientBadRequest,
    ConstellixClientNotFound,
    ConstellixClientUnauthorized,
    ConstellixHttpException,
)
from .managers import (
    ContactListManager,
    DomainManager,
    IPFilterManager,
    TemplateManager,
)
from .pagination import PaginatorFactory


class ConstellixClient(object):
    BASE_URL = 'https://api.dns.constellix.com/v4'

    def __init__(
        self, api_key, secret_key, base_url=None, paginator_factory=None
    ):
        self.log = logging.getLogger('ConstellixClient')
        self.base_url = (base_url or self.BASE_URL).rstrip('/')
        self.log.debug(
            '__init__: api_key=***, secret_key=***, base_url=%s',
            self.base_url,
        )
        self._api_key = api_key
        self._secret_key = secret_key

        session = Session()
        session.headers.update(
            {
                'Accept': 'application/json',
                'Content-Type': 'application/json',
                'User-Agent': f'constellix-client/{package_version}',
            }
        )
        self._session = session

        if paginator_factory is None:
            paginator_factory = PaginatorFactory()
        self._paginator_factory = paginator_factory

        self._domains = None
        self._templates = None
        self._ip_filters = None
        self._contact_lists = None

    # --- Configuration ----------------------------------------------------

    @property
    def paginator_factory(self):
        return self._paginator_factory

    @paginator_factory.setter
    def paginator_factory(self, factory):
        self._paginator_factory = factory

    # --- Managers ---------------------------------------------------------

    @property
    def domains(self):
        if self._domains is None:
            self._domains = DomainManager(self)
        return self._domains

    @property
    def templates(self):
        if self._templates is None:
            self._templates = TemplateManager(self)
        return self._templates

    @property
    def ip_filters(self):
        if self._ip_filters is None:
            self._ip_filters = IPFilterManager(self)
        return self._ip_filters

    @property
    def contact_lists(self):
        if self._contact_lists is None:
            self._contact_lists = ContactListManager(self)
        return self._contact_lists

    # --- HTTP -------------------------------------------------------------

    def _auth_token(self):
        timestamp = str(int(time.time() * 1000))
        digest = hmac_new(
            self._secret_key.encode('utf-8'), timestamp.encode('utf-8'), sha1
        ).digest()
        signature = b64encode(digest).decode('utf-8')
        return f'{self._api_key}:{signature}:{timestamp}'

    def _do(self, method, path, params=None, data=None):
        url = f'{self.base_url}{path}'
        self.log.debug(
            '_do: method=%s, path=%s, params=%s', method, path, params
        )
        headers = {'Authorization': f'Bearer {self._auth_token()}'}
        response = self._session.request(
            method, url, params=params, json=data, headers=headers
        )
        if response.status_code == 401:
            raise ConstellixClientUnauthorized()
        if response.status_code == 404:
            raise ConstellixClientNotFound()
        if response.status_code in (400, 422):
            raise ConstellixClientBadRequest(
                response.status_code, self._errors(response)
            )
        try:
            response.raise_for_status()
        except HTTPError as e:
            raise ConstellixHttpException(response.status_code, str(e)) from e
        return response

    def _errors(self, response):
        try:
            body = response.json()
        except ValueError:
            return []
        if isinstance(body, dict):
            return body.get('errors', [])
        return []

    def _do_json(self, method, path, params=None, data=None):
        response = self._do(method, path, params, data)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def get(self, path, params=None):
        return self._do_json('GET', path, params=params)

    def post(self, path, data=None):
        return self._do_json('POST', path, data=data)

    def put(self, path, data=None):
        return self._do_json('PUT', path, data=data)

    def delete(self, path):
        return self._do_json('DELETE', path)
