#    Copyright (C) 2010 Jeremy S. Sanders
#    Email: Jeremy Sanders <jeremy@jeremysanders.net>
#
#    This program is free software; you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation; either version 2 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License along
#    with this program; if not, write to the Free Software Foundation, Inc.,
#    51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
###############################################################################

import unittest

import numpy as N

from nicelabels import utils

class TestFormatLabels(unittest.TestCase):

    def testRule(self):
        # -3.2 is not below 1 in magnitude, so it is shown as an integer
        self.assertEqual(utils.formatLabels([0.05, 100.0, -3.2]),
                         ['0.1', '100', '-3'])

    def testSmall(self):
        self.assertEqual(utils.formatLabels([0.25, -0.5, 0.]),
                         ['0.2', '-0.5', '0.0'])

    def testEmpty(self):
        self.assertEqual(utils.formatLabels([]), [])
        self.assertEqual(utils.formatLabels(None), [])

    def testNumpy(self):
        vals = N.array([0.1, 0.2, 1., 2.])
        labels = utils.formatLabels(vals)
        self.assertEqual(len(labels), len(vals))
        self.assertEqual(labels, ['0.1', '0.2', '1', '2'])

    def testRounding(self):
        # % formatting rounds exact halves to even
        self.assertEqual(utils.formatLabels([2.5, 3.5]), ['2', '4'])

    def testNoDeduplication(self):
        self.assertEqual(utils.formatLabels([0.01, 0.02]), ['0.0', '0.0'])

class TestFormatLabelsWith(unittest.TestCase):

    def testFormat(self):
        self.assertEqual(utils.formatLabelsWith([1.5, 2.], '%.2f'),
                         ['1.50', '2.00'])

    def testDefault(self):
        self.assertEqual(utils.formatLabelsWith([1.5, 2.], ''), ['1.5', '2'])
        self.assertEqual(utils.formatLabelsWith([1e-5], None), ['1e-05'])

    def testPercent(self):
        self.assertEqual(utils.formatLabelsWith([50.], '%g%%'), ['50%'])

    def testBadFormat(self):
        self.assertRaises(utils.InvalidType,
                          utils.formatLabelsWith, [1.], '%s')
        self.assertRaises(utils.InvalidType,
                          utils.formatLabelsWith, [1.], 'abc')
        self.assertRaises(utils.InvalidType,
                          utils.formatLabelsWith, [1.], '%g to %g')

if __name__ == '__main__':
    unittest.main()
