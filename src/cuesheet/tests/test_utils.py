#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

import unittest
from unittest import mock

import os

from cuesheet.utils import KwVarsObject, env_flag

ENV_VAR = 'CUESHEET_TEST_FLAG'


class test_utils(unittest.TestCase):

    def test_env_flag(self):

        for value, expected in (
                ('', False),
                ('0', False),
                ('false', False),
                ('False', False),
                ('no', False),
                ('off', False),
                (' OFF ', False),
                ('1', True),
                ('yes', True),
                ('on', True),
                ('true', True),
                ('debug', True),
        ):
            with self.subTest(value=value):
                with mock.patch.dict(os.environ, {ENV_VAR: value}):
                    self.assertIs(env_flag(ENV_VAR), expected)

        with mock.patch.dict(os.environ):
            os.environ.pop(ENV_VAR, None)
            self.assertIs(env_flag(ENV_VAR), False)
            self.assertIs(env_flag(ENV_VAR, default=True), True)

    def test_KwVarsObject(self):

        class point(KwVarsObject):
            def __init__(self, x, y):
                self.x = x
                self.y = y

        p = point(1, 2)
        self.assertEqual(repr(p), 'point(x=1, y=2)')
        self.assertEqual(p, point(1, 2))
        self.assertNotEqual(p, point(1, 3))
        self.assertEqual(p._replace(y=3), point(1, 3))
        self.assertEqual(p.y, 2)
        with self.assertRaises(TypeError):
            hash(p)

if __name__ == '__main__':
    unittest.main()
