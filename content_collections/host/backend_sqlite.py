import os
import sqlite3

from ..utilities.extended_json import json
from .base import HostBackend

CC_DB_FILENAME = os.environ.get('CC_DB_FILENAME', '.cc.db')


class SqliteBackend(HostBackend):

    KIND = 'sqlite'

    def __init__(self, filename=None):
        self.filename = filename or CC_DB_FILENAME
        conn = sqlite3.connect(self.filename)
        cursor = conn.cursor()
        cursor.execute(
            '''CREATE TABLE IF NOT EXISTS objects (_id integer primary key, _value text)'''
        )
        conn.commit()
        conn.close()

    def _connect(self):
        return sqlite3.connect(self.filename)

    def records(self):
        conn = self._connect()
        try:
            rows = conn.execute('SELECT _id, _value FROM objects ORDER BY _id ASC').fetchall()
        finally:
            conn.close()
        for object_id, value in rows:
            yield object_id, json.loads(value)

    def load_data(self, object_id):
        conn = self._connect()
        try:
            result = conn.execute(
                'SELECT _value FROM objects WHERE _id=?',
                (object_id,)
            ).fetchone()
        finally:
            conn.close()
        if result is not None:
            return json.loads(result[0])
        return None

    def store_data(self, object_id, data):
        value = json.dumps(data)
        conn = self._connect()
        try:
            conn.execute('DELETE FROM objects WHERE _id=?', (object_id,))
            conn.execute('INSERT INTO objects VALUES (?,?)', (object_id, value))
            conn.commit()
        finally:
            conn.close()

    def delete_data(self, object_id):
        conn = self._connect()
        try:
            conn.execute('DELETE FROM objects WHERE _id=?', (object_id,))
            conn.commit()
        finally:
            conn.close()

    def reset(self):
        conn = self._connect()
        try:
            conn.execute('DELETE FROM objects')
            conn.commit()
        finally:
            conn.close()

    def next_id(self):
        conn = self._connect()
        try:
            result = conn.execute('SELECT MAX(_id) FROM objects').fetchone()
        finally:
            conn.close()
        return (result[0] or 0) + 1
