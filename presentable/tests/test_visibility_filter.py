from presentable.tests.test_case import TestCase
from presentable.visibility_filter import filter_attributes


_ATTRIBUTES = {
    'id': 1,
    'first_name': 'David',
    'last_name': 'Hemphill',
    'full_name': 'David Lee Hemphill',
}


class VisibilityFilterTests(TestCase):


    def test_no_filtering(self):

        result = filter_attributes(_ATTRIBUTES)

        self.assert_items_equal(result, _ATTRIBUTES)
        self.assertIsNot(result, _ATTRIBUTES)


    def test_hidden(self):
        result = filter_attributes(_ATTRIBUTES, hidden=['first_name', 'id'])
        self.assert_items_equal(result, {
            'last_name': 'Hemphill',
            'full_name': 'David Lee Hemphill',
        })


    def test_visible(self):

        # Result order is attribute order, not visible list order.
        result = filter_attributes(
            _ATTRIBUTES, visible=['full_name', 'id'])

        self.assert_items_equal(
            result, {'id': 1, 'full_name': 'David Lee Hemphill'})


    def test_visible_takes_precedence(self):
        result = filter_attributes(
            _ATTRIBUTES, hidden=['id'], visible=['id', 'last_name'])
        self.assert_items_equal(result, {'id': 1, 'last_name': 'Hemphill'})


    def test_unknown_names(self):

        result = filter_attributes(_ATTRIBUTES, hidden=['bobo'])
        self.assert_items_equal(result, _ATTRIBUTES)

        result = filter_attributes(_ATTRIBUTES, visible=['bobo'])
        self.assertEqual(result, {})


    def test_camel_case_keys(self):

        attributes = {'id': 1, 'firstName': 'David', 'fullName': 'David Lee'}

        result = filter_attributes(attributes, hidden=['first_name'])
        self.assert_items_equal(result, {'id': 1, 'fullName': 'David Lee'})

        result = filter_attributes(attributes, visible=['fullName'])
        self.assert_items_equal(result, {'fullName': 'David Lee'})


    def test_camel_case_keys_with_digits(self):

        attributes = {'id': 1, 'addressLine1': 'Main St', 'addressLine2': ''}

        result = filter_attributes(attributes, hidden=['address_line_2'])
        self.assert_items_equal(result, {'id': 1, 'addressLine1': 'Main St'})

        result = filter_attributes(attributes, visible=['address_line_1'])
        self.assert_items_equal(result, {'addressLine1': 'Main St'})
