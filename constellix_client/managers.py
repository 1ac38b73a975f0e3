#
#
#

"""Managers perform the HTTP calls for one resource type each.

Managers build resource URLs from ``BASE_URI`` templates, unwrap the API's
``{"data": ...}`` envelope and hydrate models. List calls are handed to the
client's paginator factory.
"""

import logging

from .exceptions import (
    ConstellixClientNotFound,
    ConstellixException,
    InvalidArgument,
    ModelNotFoundException,
)
from .models import (
    ContactList,
    Domain,
    DomainRecord,
    IPFilter,
    SlackWebhook,
    TeamsWebhook,
    Template,
    TemplateRecord,
)


class AbstractManager(object):
    BASE_URI = None
    MODEL_CLASS = None

    def __init__(self, client):
        self.client = client
        self.log = logging.getLogger(self.__class__.__name__)

    def uri_params(self):
        """Values for the ``:placeholder`` segments of ``BASE_URI``."""
        return {}

    def base_uri(self):
        uri = self.BASE_URI
        for key, value in self.uri_params().items():
            uri = uri.replace(f':{key}', str(value))
        return uri

    def object_uri(self, model_id):
        return f'{self.base_uri()}/{model_id}'

    def _model_name(self):
        return self.MODEL_CLASS.__name__

    def _transform_api_data(self, data):
        return data

    def _create_object(self, data=None):
        return self.MODEL_CLASS(self, data)

    def create(self):
        """Instantiate a new, unsaved model bound to this manager."""
        return self._create_object()

    def _fetch(self, model_id):
        try:
            data = self.client.get(self.object_uri(model_id))
        except ConstellixClientNotFound as e:
            raise ModelNotFoundException(self._model_name(), model_id) from e
        if not data:
            raise ModelNotFoundException(self._model_name(), model_id)
        return self._transform_api_data(data['data'])

    def get(self, model_id):
        self.log.debug('get: id=%s', model_id)
        return self._create_object(self._fetch(model_id))

    def paginate(self, page=1, per_page=20, filters=None):
        """Fetch one page of resources.

        The result is whatever the client's paginator factory builds, by
        default a :class:`~constellix_client.pagination.Paginator`.

        Args:
            page: 1-indexed page to fetch
            per_page: Number of items per page
            filters: Extra query parameters passed to the API

        Returns:
            Page representation from the paginator factory

        Raises:
            InvalidArgument: If page or per_page is less than 1
            ConstellixException: If the API returns no data
        """
        items, total = self._fetch_page(page, per_page, filters)
        return self.client.paginator_factory.paginate(
            items, total, per_page, page
        )

    def _list_uri(self, filters):
        return self.base_uri()

    def _fetch_page(self, page, per_page, filters):
        if page < 1 or per_page < 1:
            raise InvalidArgument(
                f'page and per_page must be at least 1, '
                f'got {page} and {per_page}'
            )
        uri = self._list_uri(filters or {})
        params = dict(filters or {})
        params.update({'page': page, 'perPage': per_page})
        self.log.debug('_fetch_page: uri=%s, params=%s', uri, params)

        data = self.client.get(uri, params)
        if not data:
            raise ConstellixException('No data returned from API')
        items = [
            self._create_object(self._transform_api_data(d))
            for d in data.get('data') or []
        ]
        pagination = (data.get('meta') or {}).get('pagination') or {}
        return items, pagination.get('total') or 0

    def get_all(self, per_page=100, filters=None):
        """Yield every resource, walking the pages in order.

        Pages are walked using the API's total, independently of the
        client's paginator factory.
        """
        page = 1
        while True:
            items, total = self._fetch_page(page, per_page, filters)
            yield from items
            if not items or page * per_page >= total:
                break
            page += 1

    def save(self, model):
        payload = model.transform_for_api()
        if model.id:
            self.log.debug(
                'save: updating %s id=%s', self._model_name(), model.id
            )
            data = self.client.put(self.object_uri(model.id), payload)
        else:
            self.log.debug('save: creating %s', self._model_name())
            data = self.client.post(self.base_uri(), payload)
        if data:
            model.populate_from_api(self._transform_api_data(data['data']))
        return model

    def delete(self, model):
        if not model.id:
            raise ConstellixException(
                f'Cannot delete a {self._model_name()} '
                'that has not been created'
            )
        self.log.debug('delete: %s id=%s', self._model_name(), model.id)
        self.client.delete(self.object_uri(model.id))
        model.id = None

    def refresh(self, model):
        if not model.id:
            raise ConstellixException(
                f'Cannot refresh a {self._model_name()} '
                'that has not been created'
            )
        self.log.debug('refresh: %s id=%s', self._model_name(), model.id)
        model.populate_from_api(self._fetch(model.id))
        return model


class DomainManager(AbstractManager):
    BASE_URI = '/domains'
    MODEL_CLASS = Domain

    def _list_uri(self, filters):
        """Domain list endpoint for ``filters``.

        Passing ``name`` in ``filters`` switches to the domain search
        endpoint, which accepts wildcards at the start and end of the name,
        e.g. ``{'name': '*example.com'}``. Domains returned by a search only
        carry their id and name; call ``refresh()`` to load the rest.
        """
        if 'name' in filters:
            return '/search/domains'
        return super()._list_uri(filters)


class TemplateManager(AbstractManager):
    BASE_URI = '/templates'
    MODEL_CLASS = Template


class IPFilterManager(AbstractManager):
    BASE_URI = '/ipfilters'
    MODEL_CLASS = IPFilter


class ContactListManager(AbstractManager):
    BASE_URI = '/contactlists'
    MODEL_CLASS = ContactList


class AbstractChildManager(AbstractManager):
    """Manager for resources nested under a parent resource.

    ``PARENT_NAME`` is the attribute the parent is stored under on both the
    manager and the models it creates, ``URI_PARAM`` the ``BASE_URI``
    placeholder filled with the parent's id.
    """

    PARENT_NAME = None
    URI_PARAM = None

    def __init__(self, client, parent):
        super().__init__(client)
        setattr(self, self.PARENT_NAME, parent)

    @property
    def parent(self):
        return getattr(self, self.PARENT_NAME)

    def uri_params(self):
        if not self.parent.id:
            raise ConstellixException(
                f'{self.parent.__class__.__name__} must be created before '
                'managing its items'
            )
        return {self.URI_PARAM: self.parent.id}

    def _create_object(self, data=None):
        item = super()._create_object(data)
        setattr(item, self.PARENT_NAME, self.parent)
        return item


class AbstractContactListItemManager(AbstractChildManager):
    PARENT_NAME = 'contact_list'
    URI_PARAM = 'contactlist_id'


class TeamsWebhookManager(AbstractContactListItemManager):
    BASE_URI = '/contactlists/:contactlist_id/teams'
    MODEL_CLASS = TeamsWebhook


class SlackWebhookManager(AbstractContactListItemManager):
    BASE_URI = '/contactlists/:contactlist_id/slack'
    MODEL_CLASS = SlackWebhook


class DomainRecordManager(AbstractChildManager):
    BASE_URI = '/domains/:domain_id/records'
    MODEL_CLASS = DomainRecord
    PARENT_NAME = 'domain'
    URI_PARAM = 'domain_id'


class TemplateRecordManager(AbstractChildManager):
    BASE_URI = '/templates/:template_id/records'
    MODEL_CLASS = TemplateRecord
    PARENT_NAME = 'template'
    URI_PARAM = 'template_id'
