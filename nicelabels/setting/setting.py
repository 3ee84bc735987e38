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

"""Typed, checked values for the options of axis labelling.

e.g.

s = Int('nearness', 0, minval=-1000, maxval=10)
s.val = 1
s.fromText('-50')
s.val = 11        # raises utils.InvalidType
"""

from .. import utils

class Setting(object):
    """A named option which only accepts values of its type."""

    typename = 'setting'

    def __init__(self, name, value, descr='', usertext=''):
        """Initialise the setting.

        name: name used to look up the setting
        value: default and initial value
        descr: description of the setting
        usertext: name of the setting shown to the user
        """
        self.name = name
        self.descr = descr
        self.usertext = usertext or name
        self.default = self.normalize(value)
        self._val = self.default

    def _newCopy(self):
        """Make a new setting of this type with the same default."""
        return self.__class__(self.name, self.default, descr=self.descr,
                              usertext=self.usertext)

    def copy(self):
        """Return an independent setting with the same default and value."""
        obj = self._newCopy()
        obj._val = self._val
        return obj

    def get(self):
        return self._val

    def set(self, v):
        self._val = self.normalize(v)

    val = property(get, set, None, 'Get or modify the value of the setting')

    def isDefault(self):
        return self._val == self.default

    def reset(self):
        """Go back to the default value."""
        self._val = self.default

    def normalize(self, val):
        """Return val in the form stored by the setting.

        Raises utils.InvalidType if val cannot be held."""
        raise NotImplementedError

    def parseText(self, text):
        """Convert text, e.g. from a configuration file, to a value."""
        raise NotImplementedError

    def fromText(self, text):
        """Set the value from text."""
        self.val = self.parseText(text)

    def toText(self):
        return str(self._val)

class Bool(Setting):
    """Switch an option on or off."""

    typename = 'bool'

    truewords = ('true', 'yes', 'on', 't', 'y', '1')
    falsewords = ('false', 'no', 'off', 'f', 'n', '0')

    def normalize(self, val):
        # ints are allowed as 0/1 flags, floats are not
        if isinstance(val, int):
            return bool(val)
        raise utils.InvalidType(
            '%s needs a boolean, not %r' % (self.name, val))

    def parseText(self, text):
        word = text.strip().lower()
        if word in self.truewords:
            return True
        elif word in self.falsewords:
            return False
        raise utils.InvalidType(
            '%s needs true or false, not %r' % (self.name, text))

class Int(Setting):
    """An integer option between minval and maxval inclusive."""

    typename = 'int'

    def __init__(self, name, value, minval=-1000000, maxval=1000000, **args):
        self.minval = minval
        self.maxval = maxval
        Setting.__init__(self, name, value, **args)

    def _newCopy(self):
        return self.__class__(self.name, self.default, minval=self.minval,
                              maxval=self.maxval, descr=self.descr,
                              usertext=self.usertext)

    def normalize(self, val):
        if not isinstance(val, int) or isinstance(val, bool):
            raise utils.InvalidType(
                '%s needs an integer, not %r' % (self.name, val))
        if val < self.minval or val > self.maxval:
            raise utils.InvalidType(
                '%s must be between %i and %i, not %i' % (
                    self.name, self.minval, self.maxval, val))
        return val

    def parseText(self, text):
        try:
            return self.normalize( int(text) )
        except ValueError:
            raise utils.InvalidType(
                '%s needs an integer, not %r' % (self.name, text))

class Choice(Setting):
    """One of a fixed set of strings."""

    typename = 'choice'

    def __init__(self, name, vallist, value, **args):
        self.vallist = tuple(vallist)
        Setting.__init__(self, name, value, **args)

    def _newCopy(self):
        return self.__class__(self.name, self.vallist, self.default,
                              descr=self.descr, usertext=self.usertext)

    def normalize(self, val):
        if val in self.vallist:
            return val
        raise utils.InvalidType(
            '%s must be one of %s, not %r' % (
                self.name, ', '.join(self.vallist), val))

    def parseText(self, text):
        return self.normalize( text.strip() )

class LabelFormat(Setting):
    """A printf style format for label text, or empty for automatic."""

    typename = 'label-format'

    def normalize(self, val):
        if not isinstance(val, str):
            raise utils.InvalidType(
                '%s needs a format string, not %r' % (self.name, val))
        if val:
            utils.checkLabelFormat(val)
        return val

    def parseText(self, text):
        # spaces can be part of the format
        return self.normalize(text)
