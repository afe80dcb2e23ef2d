from presentable.tests.test_case import TestCase
import presentable.util.case_utils as case_utils


class CaseUtilsTests(TestCase):


    def test_snake_to_camel(self):

        cases = (
            ('', ''),
            ('one', 'one'),
            ('one_two', 'oneTwo'),
            ('one_two_three', 'oneTwoThree'),
            ('full_name', 'fullName'),
            ('address_line_2', 'addressLine2'),
            ('oneTwo', 'oneTwo'),
            ('One_two', 'oneTwo'),
            ('_private', 'private'),
            ('ID', 'id'),
            ('URL_path', 'urlPath'),
            ('HTML_parser_v2', 'htmlParserV2'),
        )

        for s, expected in cases:
            result = case_utils.snake_to_camel(s)
            self.assertEqual(result, expected)


    def test_camel_to_snake(self):

        cases = (
            ('', ''),
            ('one', 'one'),
            ('oneTwo', 'one_two'),
            ('oneTwoThree', 'one_two_three'),
            ('fullName', 'full_name'),
            ('FullName', 'full_name'),
            ('full_name', 'full_name'),
            ('HTMLParser', 'html_parser'),
            ('addressLine2', 'address_line2'),
            ('address_line_2', 'address_line_2'),
        )

        for s, expected in cases:
            result = case_utils.camel_to_snake(s)
            self.assertEqual(result, expected)


    def test_camel_of_snake_equals_camel(self):

        keys = (
            'id', 'first_name', 'created_at', 'published_year',
            'a_b_c', 'address_line_2', 'fullName', 'createdAt', 'ID',
            'URL_path')

        for k in keys:
            self.assertEqual(
                case_utils.snake_to_camel(case_utils.camel_to_snake(k)),
                case_utils.snake_to_camel(k))


    def test_convert_keys(self):

        d = {'first_name': 'David', 'last_name': 'Hemphill', 'id': 1}

        result = case_utils.convert_keys(d, case_utils.snake_to_camel)

        self.assertEqual(
            list(result.items()),
            [('firstName', 'David'), ('lastName', 'Hemphill'), ('id', 1)])

        # Original dictionary is left alone.
        self.assertIn('first_name', d)


    def test_convert_keys_leaves_nested_keys_alone(self):

        d = {'outer_key': {'inner_key': 1}}

        result = case_utils.convert_keys(d, case_utils.snake_to_camel)

        self.assertEqual(result, {'outerKey': {'inner_key': 1}})
