#    Copyright (C) 2005 Jeremy S. Sanders
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

"""Predefined groups of settings."""

from . import setting
from .settings import Settings
from ..axislabels import LINEAR, LOG, BOUNDED

class AxisLabelSettings(Settings):
    '''How the labels of an axis are chosen.'''

    modes = (LINEAR, LOG, BOUNDED)

    def __init__(self, name='Labels', **args):
        Settings.__init__(self, name, **args)

        self.add( setting.Choice(
            'mode', self.modes, LINEAR,
            descr = 'How tick values are chosen: nearness on a linear '
                    'axis, decades on a log axis, or a bounded count',
            usertext = 'Mode') )
        self.add( setting.Bool(
            'includeEndpoints', False,
            descr = 'First and last labels are the data minimum and '
                    'maximum rather than rounded limits',
            usertext = 'Include end points') )
        self.add( setting.Int(
            'nearness', 0,
            descr = 'Decades finer than the data magnitude for the label '
                    'increment, or minus a percentage of that decade',
            usertext = 'Nearness',
            minval = -1000,
            maxval = 10 ) )
        self.add( setting.Int(
            'minLabels', 5,
            descr = 'Minimum number of labels in bounded mode',
            usertext = 'Min labels',
            minval = 2,
            maxval = 1000 ) )
        self.add( setting.Int(
            'maxLabels', 10,
            descr = 'Maximum number of labels in bounded mode',
            usertext = 'Max labels',
            minval = 2,
            maxval = 1000 ) )
        self.add( setting.LabelFormat(
            'format', '',
            descr = 'Format for label text, e.g. %.2f. Leave empty to '
                    'use one decimal place below 1 and integers above',
            usertext = 'Format') )
