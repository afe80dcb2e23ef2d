from decimal import Decimal
import datetime
import json

from presentable.tests.sample_presenters import SamplePresenter
from presentable.tests.sample_records import SampleDictRecord
from presentable.tests.test_case import TestCase
import presentable.util.json_utils as json_utils


class JsonUtilsTests(TestCase):


    def test_dumps(self):
        self.assertEqual(json_utils.dumps({'a': 1, 'b': [1, 2]}),
                         '{"a": 1, "b": [1, 2]}')


    def test_dumps_of_dates_and_decimals(self):

        obj = {
            'date': datetime.date(2015, 10, 14),
            'time': datetime.datetime(2015, 10, 14, 12, 30),
            'price': Decimal('1.50'),
        }

        self.assertEqual(json.loads(json_utils.dumps(obj)), {
            'date': '2015-10-14',
            'time': '2015-10-14T12:30:00',
            'price': '1.50',
        })


    def test_dumps_of_nested_presenter(self):

        record = SampleDictRecord('David', 'Hemphill')
        obj = {'author': SamplePresenter(record)}

        self.assertEqual(json.loads(json_utils.dumps(obj)), {
            'author': {
                'last_name': 'Hemphill',
                'first_name': 'David',
                'full_name': 'David Lee Hemphill',
            }
        })


    def test_dumps_of_object_with_to_dict(self):
        record = SampleDictRecord('David', 'Hemphill')
        self.assertEqual(
            json_utils.dumps([record]),
            '[{"last_name": "Hemphill", "first_name": "David"}]')


    def test_dumps_options(self):
        s = json_utils.dumps({'name': 'Zoë'}, ensure_ascii=False, indent=2)
        self.assertEqual(s, '{\n  "name": "Zoë"\n}')


    def test_dumps_of_unserializable_object(self):
        self.assert_raises(TypeError, json_utils.dumps, {'x': object()})
