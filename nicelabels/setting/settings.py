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

"""An ordered group of settings."""

from .. import utils

class Settings(object):
    """Settings accessed as attributes.

    s.nearness gives the value of the setting called nearness, and
    s.nearness = 1 checks and stores a new value. Assigning to a name
    which is not a setting raises AttributeError, so a misspelt option
    is not silently ignored.
    """

    def __init__(self, name, descr=''):
        d = self.__dict__
        d['name'] = name
        d['descr'] = descr
        d['setdict'] = {}
        d['setnames'] = []

    def copy(self):
        """Make an independent copy with the same values."""
        s = self.__class__.__new__(self.__class__)
        Settings.__init__(s, self.name, descr=self.descr)
        for name in self.setnames:
            s.add( self.setdict[name].copy() )
        return s

    def add(self, setting):
        """Add a setting at the end of the group."""
        name = setting.name
        if not utils.validPythonIdentifier(name):
            raise ValueError('Invalid setting name %r' % name)
        if name in self.setdict:
            raise RuntimeError('Setting %r already exists' % name)
        self.setdict[name] = setting
        self.setnames.append(name)

    def get(self, name):
        """Return the setting object called name."""
        return self.setdict[name]

    def getNames(self):
        return list(self.setnames)

    def __contains__(self, name):
        return name in self.setdict

    def __getattr__(self, name):
        try:
            return self.__dict__['setdict'][name].val
        except KeyError:
            raise AttributeError("'%s' is not a setting" % name)

    def __setattr__(self, name, val):
        if name not in self.setdict:
            raise AttributeError("'%s' is not a setting" % name)
        self.setdict[name].val = val

    def values(self):
        """Return a dict of every setting name and value."""
        return dict( (n, self.setdict[n].val) for n in self.setnames )

    def changed(self):
        """Return a dict of the settings which differ from their defaults."""
        return dict( (n, self.setdict[n].val) for n in self.setnames
                     if not self.setdict[n].isDefault() )

    def update(self, vals):
        """Set several values from a dict.

        The values are all checked first, so nothing is changed if any
        are invalid.
        """
        for name in vals:
            if name not in self.setdict:
                raise AttributeError("'%s' is not a setting" % name)
        normed = dict( (n, self.setdict[n].normalize(v))
                       for n, v in vals.items() )
        for name, val in normed.items():
            self.setdict[name].val = val

    def reset(self):
        for name in self.setnames:
            self.setdict[name].reset()
