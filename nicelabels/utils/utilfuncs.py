# utilfuncs.py
# utility functions and exceptions

#    Copyright (C) 2003 Jeremy S. Sanders
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

import re

class InvalidType(Exception):
    """Exception used when invalid values are used in settings."""

class LabelError(ValueError):
    """Base exception for failures computing axis labels."""

class DegenerateRangeError(LabelError):
    """Range endpoints are equal and cannot be repaired."""

class InvalidRangeError(LabelError):
    """Range is not ascending, or cannot be used on the axis type."""

class InvalidCountRangeError(LabelError):
    """Minimum number of labels is not less than the maximum."""

id_re = re.compile('^[A-Za-z_][A-Za-z0-9_]*$')
def validPythonIdentifier(name):
    """Is this a valid python identifier?"""
    return id_re.match(name) is not None
