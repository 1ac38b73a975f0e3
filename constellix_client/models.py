#
#
#

"""Models wrapping Constellix API resources.

A model keeps its API properties in a dict and exposes them as attributes.
Only properties listed in ``EDITABLE`` can be assigned; everything else the
API returns is read-only. Keys are camelCase on the wire and snake_case on
the model.
"""

import re
from copy import deepcopy
from datetime import datetime

from .enums import Continent
from .exceptions import ConstellixException, ReadOnlyPropertyException

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def snake_case(name):
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def camel_case(name):
    first, *rest = name.split('_')
    return first + ''.join(part.title() for part in rest)


def parse_datetime(value):
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value.replace('Z', '+00:00'))


class AbstractModel(object):
    PROPS = {}
    EDITABLE = ()
    DATETIMES = ()

    def __init__(self, manager, data=None):
        self.__dict__.update(
            {
                'manager': manager,
                'id': None,
                '_props': deepcopy(self.PROPS),
                '_changed': set(),
                '_children': {},
            }
        )
        if data is not None:
            self.populate_from_api(data)

    def __getattr__(self, name):
        props = self.__dict__.get('_props')
        if props is not None and name in props:
            return props[name]
        raise AttributeError(
            f"'{self.__class__.__name__}' object has no attribute '{name}'"
        )

    def __setattr__(self, name, value):
        if name in self.PROPS:
            if name not in self.EDITABLE:
                raise ReadOnlyPropertyException(self.__class__.__name__, name)
            self._props[name] = value
            self._changed.add(name)
        else:
            super().__setattr__(name, value)

    def __repr__(self):
        return f'<{self.__class__.__name__} id={self.id}>'

    @property
    def client(self):
        return self.manager.client

    def _child_manager(self, manager_class, what):
        if not self.id:
            raise ConstellixException(
                f'{self.__class__.__name__} must be created before you can '
                f'access {what}'
            )
        if manager_class not in self._children:
            self._children[manager_class] = manager_class(self.client, self)
        return self._children[manager_class]

    def has_changes(self):
        return bool(self._changed)

    def populate_from_api(self, data):
        """Load an API record into this model, discarding local changes."""
        self._parse_api_data(dict(data))
        self._changed.clear()
        return self

    def _parse_api_data(self, data):
        if 'id' in data:
            self.__dict__['id'] = data.pop('id')
        for key, value in data.items():
            name = snake_case(key)
            if name in self._props:
                self._props[name] = value
        for name in self.DATETIMES:
            self._props[name] = parse_datetime(self._props.get(name))

    def transform_for_api(self):
        return {camel_case(name): self._props[name] for name in self.EDITABLE}

    def save(self):
        self.manager.save(self)
        return self

    def delete(self):
        self.manager.delete(self)

    def refresh(self):
        self.manager.refresh(self)
        return self


class Domain(AbstractModel):
    PROPS = {
        'name': None,
        'note': None,
        'status': None,
        'tags': [],
        'geoip': False,
        'gtd': False,
        'nameservers': [],
        'created_at': None,
        'updated_at': None,
    }
    EDITABLE = ('name', 'note', 'tags', 'geoip', 'gtd')
    DATETIMES = ('created_at', 'updated_at')

    @property
    def records(self):
        from .managers import DomainRecordManager

        return self._child_manager(DomainRecordManager, 'records')


class Template(AbstractModel):
    PROPS = {
        'name': None,
        'version': None,
        'geoip': None,
        'gtd': None,
        'created_at': None,
        'updated_at': None,
    }
    EDITABLE = ('name', 'geoip', 'gtd')
    DATETIMES = ('created_at', 'updated_at')

    @property
    def records(self):
        from .managers import TemplateRecordManager

        return self._child_manager(TemplateRecordManager, 'records')


class IPFilterRegion(object):
    """A continent/country/region/ASN tuple used by IP filters."""

    def __init__(
        self, data=None, continent=None, country=None, region=None, asn=None
    ):
        data = data or {}
        continent = data.get('continent', continent)
        if continent is not None and not isinstance(continent, Continent):
            continent = Continent(continent)
        self.continent = continent
        self.country = data.get('country', country)
        self.region = data.get('region', region)
        self.asn = data.get('asn', asn)

    def __eq__(self, other):
        if not isinstance(other, IPFilterRegion):
            return NotImplemented
        return self.transform_for_api() == other.transform_for_api()

    def __repr__(self):
        return f'<IPFilterRegion {self.transform_for_api()}>'

    def transform_for_api(self):
        return {
            'continent': self.continent.value if self.continent else None,
            'country': self.country,
            'region': self.region,
            'asn': self.asn,
        }


class IPFilter(AbstractModel):
    PROPS = {
        'name': None,
        'rules_limit': 100,
        'continents': [],
        'countries': [],
        'asn': [],
        'ipv4': [],
        'ipv6': [],
        'regions': [],
    }
    EDITABLE = (
        'name',
        'rules_limit',
        'continents',
        'countries',
        'asn',
        'ipv4',
        'ipv6',
        'regions',
    )

    def _parse_api_data(self, data):
        super()._parse_api_data(data)
        if 'continents' in data:
            self._props['continents'] = [
                Continent(c) for c in data['continents'] or []
            ]
        if isinstance(data.get('regions'), list):
            self._props['regions'] = [
                IPFilterRegion(r) for r in data['regions']
            ]

    def transform_for_api(self):
        payload = super().transform_for_api()
        payload['continents'] = [c.value for c in self.continents]
        payload['regions'] = [r.transform_for_api() for r in self.regions]
        return payload

    def _add_value(self, prop, value):
        values = list(getattr(self, prop))
        if value not in values:
            values.append(value)
            setattr(self, prop, values)
        return self

    def _remove_value(self, prop, value):
        values = list(getattr(self, prop))
        if value in values:
            values.remove(value)
            setattr(self, prop, values)
        return self

    def add_continent(self, continent):
        return self._add_value('continents', Continent(continent))

    def remove_continent(self, continent):
        return self._remove_value('continents', Continent(continent))

    def add_country(self, country):
        return self._add_value('countries', country)

    def remove_country(self, country):
        return self._remove_value('countries', country)

    def add_asn(self, asn):
        return self._add_value('asn', asn)

    def remove_asn(self, asn):
        return self._remove_value('asn', asn)

    def add_ipv4(self, ip):
        return self._add_value('ipv4', ip)

    def remove_ipv4(self, ip):
        return self._remove_value('ipv4', ip)

    def add_ipv6(self, ip):
        return self._add_value('ipv6', ip)

    def remove_ipv6(self, ip):
        return self._remove_value('ipv6', ip)

    def add_region(self, region):
        return self._add_value('regions', region)

    def remove_region(self, region):
        return self._remove_value('regions', region)


class ContactList(AbstractModel):
    PROPS = {'name': None, 'emails': [], 'email_count': None}
    EDITABLE = ('name', 'emails')

    @property
    def teams(self):
        from .managers import TeamsWebhookManager

        return self._child_manager(TeamsWebhookManager, 'Teams webhooks')

    @property
    def slack(self):
        from .managers import SlackWebhookManager

        return self._child_manager(SlackWebhookManager, 'Slack webhooks')


class TeamsWebhook(AbstractModel):
    PROPS = {'name': None, 'webhook': None}
    EDITABLE = ('name', 'webhook')

    def __init__(self, manager, data=None):
        self.contact_list = None
        super().__init__(manager, data)


class SlackWebhook(AbstractModel):
    PROPS = {'name': None, 'webhook': None, 'channel': None}
    EDITABLE = ('name', 'webhook', 'channel')

    def __init__(self, manager, data=None):
        self.contact_list = None
        super().__init__(manager, data)


class AbstractRecord(AbstractModel):
    PROPS = {
        'name': None,
        'type': None,
        'ttl': None,
        'mode': 'standard',
        'region': 'default',
        'ipfilter': None,
        'enabled': True,
        'value': None,
        'notes': None,
        'created_at': None,
        'updated_at': None,
    }
    EDITABLE = (
        'name',
        'type',
        'ttl',
        'mode',
        'region',
        'ipfilter',
        'enabled',
        'value',
        'notes',
    )
    DATETIMES = ('created_at', 'updated_at')


class DomainRecord(AbstractRecord):
    def __init__(self, manager, data=None):
        self.domain = None
        super().__init__(manager, data)


class TemplateRecord(AbstractRecord):
    def __init__(self, manager, data=None):
        self.template = None
        super().__init__(manager, data)
