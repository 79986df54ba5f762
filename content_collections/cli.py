import sys

import click
import yaml

from .logging_config import logging

from .errors import HostError
from .host import BACKENDS, create_backend, host_mgr, set_host
from .object_collection import ObjectCollection
from .utilities.extended_json import json


def _collection(query):
    try:
        return ObjectCollection(query or {})
    except HostError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option('--backend', type=click.Choice(sorted(BACKENDS)),
              envvar='CC_HOST_BACKEND', default='sqlite', show_default=True,
              help='Host backend to store objects in')
def cli(backend):
    set_host(create_backend(backend))


@cli.command()
@click.argument('filename', type=click.File('r'))
def load(filename):
    """Load a YAML (or JSON) list of objects into the host.
       An `id` key, when present, is used as the object id"""
    try:
        objects = yaml.safe_load(filename)
    except yaml.YAMLError as e:
        raise click.ClickException('Failed to parse %s: %s' % (filename.name, e))
    if objects is None:
        objects = []
    if isinstance(objects, dict):
        objects = [objects]
    if not isinstance(objects, list) or \
            not all(isinstance(obj, dict) for obj in objects):
        raise click.ClickException('Expected a list of mappings in %s' % filename.name)
    host = host_mgr()
    for obj in objects:
        object_id = host.add(obj, obj.get('id'))
        logging.debug('Stored object %d', object_id)
    logging.info('Loaded %d object(s) into the %s host', len(objects), host.KIND)


@cli.command()
@click.argument('query', default='')
def ids(query):
    """Print the ids matching a query string, e.g. 'type=post&limit=3'"""
    for object_id in _collection(query).ids():
        click.echo(object_id)


@cli.command()
@click.argument('query', default='')
def count(query):
    """Print the number of objects matching a query string"""
    click.echo(_collection(query).count())


@cli.command()
@click.argument('query', default='')
def show(query):
    """Print the objects matching a query string as JSON"""
    for obj in _collection(query):
        if obj is None:
            continue
        click.echo(json.dumps(dict(obj.data, id=obj.id), sort_keys=True))


@cli.command()
def reset():
    """Remove all objects from the host"""
    host_mgr().reset()


if __name__ == "__main__":
    sys.exit(cli())
