# axislabels.py
# algorithms to work out what labels to put on an axis

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
##############################################################################

"""Algorithms for choosing axis label values.

Label values are computed as if the axis is always plotted from bottom
to top (or left to right). If the range is given the other way round,
the values are computed on the swapped range and then reversed.

Three ways of choosing labels are available:
 * findLabels: step through the range with an increment a given number
   of decades finer than the data ("nearness")
 * findLogLabels: major and minor values of each decade for a log axis
 * findNLabels: try nearness values until a requested number of labels
   is found, falling back to rounding the increment up to a nice number

All functions return new numpy arrays and keep no state.
"""

import collections
import logging
import math

import numpy as N

from . import utils

logger = logging.getLogger(__name__)

# range with low <= high, and whether the input was swapped
DataRange = collections.namedtuple(
    'DataRange', ('low', 'high', 'reversed'))

# rounded limits which are multiples of increment
NiceLimits = collections.namedtuple(
    'NiceLimits', ('lowlimit', 'highlimit', 'increment'))

# axis modes
LINEAR = 'linear'
LOG = 'log'
BOUNDED = 'bounded'

# nearness values tried by findNLabels, in order of preference
pflags_smallrange = (0, 1, -50, -25, -20, -40, -10, -5, -2, -4, -1,
                     -500, -250, -200, -400, -100)
# FIXME: this is the same list as above, though it is chosen when the
# range is large compared to the magnitude of the values, where coarser
# increments were presumably wanted
pflags_largerange = (0, 1, -50, -25, -20, -40, -10, -5, -2, -4, -1,
                     -500, -250, -200, -400, -100)

# log axes start here if the data go to zero or below
log_minimum = 0.001

def normalizeRange(xmin0, xmax0):
    """Return a DataRange with low <= high.

    Raises DegenerateRangeError if the end points are equal."""

    if xmin0 == xmax0:
        raise utils.DegenerateRangeError(
            'Minimum and maximum of range are equal (%g)' % xmin0)
    elif xmin0 > xmax0:
        return DataRange(xmax0, xmin0, True)
    else:
        return DataRange(xmin0, xmax0, False)

def findLimits(low, high, pflag):
    """Find rounded limits enclosing low and high, and the increment.

    pflag is the nearness of the increment to the size of the data:
     0:  the same power of 10 (data in the 100s gives an increment of 100)
     n:  n powers of 10 lower (1 gives an increment of 10 for the 100s)
     -n: n percent of the same power of 10 (-50 gives 50 for the 100s)

    Returns NiceLimits(lowlimit, highlimit, increment).
    Raises InvalidRangeError unless low < high, or if the increment or
    limits cannot be represented as finite floats.
    """

    if not (N.isfinite(low) and N.isfinite(high)) or not low < high:
        raise utils.InvalidRangeError(
            'Cannot find limits for range %g to %g' % (low, high))

    alow = abs(low)
    ahigh = abs(high)

    # powers of 10 of each end, zero taking the power of the other end
    if alow != 0.:
        plow = int( math.floor( math.log10(alow) ) )
    if ahigh != 0.:
        phigh = int( math.floor( math.log10(ahigh) ) )
    if alow == 0.:
        plow = phigh
    if ahigh == 0.:
        phigh = plow

    increment = max(10.**plow, 10.**phigh)
    if pflag < 0:
        increment *= pflag / -100.
    else:
        for i in range(pflag):
            increment /= 10.

    # stepping by the increment must change the values
    if not N.isfinite(increment) or increment < N.spacing(max(alow, ahigh)):
        raise utils.InvalidRangeError(
            'No usable increment for range %g to %g (pflag=%i)' % (
                low, high, pflag))

    lowlimit = math.floor(low / increment) * increment
    highlimit = math.ceil(high / increment) * increment

    logger.debug('Looking for limits using increment=%g lowlimit=%g '
                 'highlimit=%g pflag=%i', increment, lowlimit, highlimit, pflag)

    # rounding in the division can leave a limit one step inside the data
    while lowlimit > low:
        lowlimit -= increment
    while highlimit < high:
        highlimit += increment

    # near the largest float the next multiple may not exist
    if not (N.isfinite(lowlimit) and N.isfinite(highlimit)):
        raise utils.InvalidRangeError(
            'Limits for range %g to %g overflow with increment %g' % (
                low, high, increment))

    # largest multiple not above low, smallest multiple not below high
    while lowlimit + increment <= low:
        lowlimit += increment
    while highlimit - increment >= high:
        highlimit -= increment

    logger.debug('For %g,%g limits are %g,%g (pflag=%i, increment=%g)',
                 low, high, lowlimit, highlimit, pflag, increment)

    return NiceLimits(lowlimit, highlimit, increment)

def findLabels(xmin0, xmax0, includeendpoints, pflag):
    """Return label values for the range xmin0 to xmax0.

    includeendpoints: if True the first and last labels are xmin0 and
     xmax0, otherwise they are the rounded limits from findLimits
    pflag: nearness of the increment to the data (see findLimits)

    If xmin0 > xmax0 the labels are returned in decreasing order.
    Raises DegenerateRangeError or InvalidRangeError if no labels can
    be found.
    """

    logger.debug('Finding labels for %g,%g (pflag=%i)', xmin0, xmax0, pflag)

    xmin, xmax, reverse = normalizeRange(xmin0, xmax0)
    lowlimit, highlimit, increment = findLimits(xmin, xmax, pflag)

    if includeendpoints:
        labels = [xmin]
        closing = xmax
    else:
        labels = [lowlimit]
        closing = highlimit

    x = lowlimit + increment
    # rounding can put the first step on top of the start value
    if x - labels[0] < increment*1e-9:
        x += increment

    while x < xmax:
        labels.append(x)
        x += increment

    # repeated addition can leave an extra step just short of the end,
    # e.g. 0.9999999999999999 before 1
    if len(labels) > 2 and labels[-1] - labels[-2] < increment/2.:
        labels.pop()
    elif len(labels) > 1 and closing - labels[-1] < increment*1e-9:
        labels.pop()
    labels.append(closing)

    labels = N.array(labels)
    if reverse:
        labels = labels[::-1].copy()
    return labels

def findLogLabels(xmin0, xmax0):
    """Return label values for a log axis from xmin0 to xmax0.

    The labels are the powers of 10 bounding the data, and the minor
    values 2..9 times each power in between. For example, 0.3 to 10.5
    gives 0.1, 0.2, ..., 0.9, 1, 2, ..., 9, 10, 20, ..., 90, 100.

    A low value at or below zero is moved up to 0.001.
    If xmin0 > xmax0 the labels are returned in decreasing order.
    Raises InvalidRangeError for equal or negative end points.
    """

    logger.debug('Finding log labels for %g,%g', xmin0, xmax0)

    if xmin0 == xmax0 or (xmin0 < 0. and xmax0 < 0.):
        raise utils.InvalidRangeError(
            'Cannot find log labels for range %g to %g' % (xmin0, xmax0))

    xmin, xmax, reverse = normalizeRange(xmin0, xmax0)
    if not N.isfinite(xmin) or not N.isfinite(xmax) or xmax <= 0.:
        raise utils.InvalidRangeError(
            'Cannot find log labels for range %g to %g' % (xmin0, xmax0))

    if xmin <= 0.:
        xmin = log_minimum

    # round down to nearest power of 10 for each
    plow = int( math.floor( math.log10(xmin) ) )
    phigh = int( math.floor( math.log10(xmax) ) )

    # make sure the powers bound the values
    if 10.**plow > xmin:
        plow -= 1
    if 10.**phigh < xmax:
        phigh += 1

    labels = []
    for i in range(plow, phigh+1):
        power = 10.**i
        if i == phigh:
            # only the closing power of the last decade
            labels.append(power)
        else:
            for j in range(1, 10):
                labels.append(j*power)

    labels = N.array(labels)
    if reverse:
        labels = labels[::-1].copy()
    return labels

def niceDouble(number):
    """Round a positive number up to its leading digit.

    e.g. 0.23 -> 0.3, 4.1 -> 5, 27 -> 30, 100 -> 100
    """

    if not (number > 0. and N.isfinite(number)):
        raise ValueError('Can only round positive numbers (%g)' % number)

    exponent = int( math.floor( math.log10(number) ) )
    power = 10.**exponent
    mantissa = number / power
    return math.ceil(mantissa) * power

def chooseLabels(low, high, minlabels, maxlabels):
    """Find nice limits and increment giving minlabels to maxlabels labels.

    The increment is made nice with niceDouble. The choice with the
    smallest extension of the limits past the data is kept. If the
    constraints cannot be met, the data range is divided into
    maxlabels-1 equal steps.

    Returns NiceLimits(lowlimit, highlimit, increment).
    Raises InvalidRangeError if high - low overflows.
    """

    # make reasonable assumptions about bogus input values
    if low >= high:
        high = low + 1.
    minlabels = max(minlabels, 2)
    maxlabels = max(maxlabels, minlabels)

    therange = high - low
    if not N.isfinite(therange):
        raise utils.InvalidRangeError(
            'Range %g to %g is too large to divide' % (low, high))

    best = None
    besterror = None

    # start with the most labels allowed
    numlabels = maxlabels
    while numlabels > minlabels:
        increment = niceDouble( therange / (numlabels - 1) )

        tmax = math.ceil( high/increment ) * increment
        tmin = math.floor( low/increment ) * increment
        if not (N.isfinite(tmin) and N.isfinite(tmax)):
            break
        tnumlabels = int( (tmax - tmin) / increment ) + 1
        if tnumlabels < minlabels or tnumlabels > numlabels:
            break

        # how far the limits extend past the data
        error = max( low - tmin, tmax - high )
        if best is None or error < besterror:
            besterror = error
            best = NiceLimits(tmin, tmax, increment)

        numlabels = tnumlabels - 1

    if best is None:
        logger.warning(
            "Can't meet constraints to get nice labels (min=%g max=%g "
            "minlabels=%i maxlabels=%i)", low, high, minlabels, maxlabels)
        best = NiceLimits(low, high, therange / (maxlabels - 1))

    return best

def findNLabels(xmin0, xmax0, includeendpoints, minlabels, maxlabels):
    """Return between minlabels and maxlabels label values.

    Nearness values are tried in order of preference with findLabels,
    looking for exactly maxlabels labels, then one fewer, down to
    minlabels. If none match, chooseLabels is used instead.

    Equal end points are widened to include zero (or 0 to 1 if both
    are zero) rather than rejected.

    Raises InvalidCountRangeError if minlabels >= maxlabels.
    """

    logger.debug('Finding %i-%i labels for %g,%g',
                 minlabels, maxlabels, xmin0, xmax0)

    if minlabels >= maxlabels:
        raise utils.InvalidCountRangeError(
            'Minimum number of labels (%i) >= maximum number (%i)' % (
                minlabels, maxlabels))

    # widen ranges which would cause problems and continue
    if xmin0 == xmax0:
        if xmin0 == 0.:
            xmin, xmax = 0., 1.
            logger.warning('Minimum and maximum are both 0. '
                           'Using 0 to 1 for labels')
        elif xmin0 > 0.:
            xmin, xmax = 0., xmax0
            logger.warning('Minimum == maximum (%g). '
                           'Using 0 as minimum for labels', xmin0)
        else:
            xmin, xmax = xmin0, 0.
            logger.warning('Minimum == maximum (%g). '
                           'Using 0 as maximum for labels', xmin0)
    else:
        xmin, xmax = xmin0, xmax0

    # if the range is small compared to the magnitude of the values,
    # smaller increments are wanted
    therange = abs(xmax - xmin)
    average = abs( (xmin + xmax) / 2. )
    ratio = therange / average if average != 0. else N.inf
    if ratio < 100.:
        logger.debug('range/average is low: %g', ratio)
        pflags = pflags_smallrange
    else:
        logger.debug('range/average is high: %g', ratio)
        pflags = pflags_largerange

    # each nearness gives the same labels whatever the target count
    candidates = []
    for pflag in pflags:
        try:
            labels = findLabels(xmin, xmax, includeendpoints, pflag)
        except utils.LabelError as e:
            logger.warning('Error getting labels with pflag=%i: %s', pflag, e)
            continue
        logger.debug('For %g,%g pflag=%i gives %i labels',
                     xmin, xmax, pflag, len(labels))
        candidates.append(labels)

    for numlabels in range(maxlabels, minlabels-1, -1):
        for labels in candidates:
            if len(labels) == numlabels:
                return labels

    # fall back to rounding the increment up to a nice number
    low, high, reverse = normalizeRange(xmin, xmax)
    lowlimit, highlimit, increment = chooseLabels(
        low, high, minlabels, maxlabels)
    logger.debug('Found nice minimum %g maximum %g increment %g',
                 lowlimit, highlimit, increment)

    size = int( (highlimit - lowlimit) / increment + 1.01 )
    labels = N.arange(size) * increment + lowlimit
    if reverse:
        labels = labels[::-1].copy()
    return labels

class AxisLabels(object):
    """Work out label values and label text for an axis.

    After calling getLabels(), the results are in the attributes
    labelvals, labeltext and reversed.
    """

    modes = (LINEAR, LOG, BOUNDED)

    def __init__( self, minval, maxval, mode=LINEAR,
                  includeendpoints=False, nearness=0,
                  minlabels=5, maxlabels=10, fmt='' ):
        """Initialise the class.

        minval and maxval are the range of the data to be plotted
        mode: one of LINEAR, LOG or BOUNDED
        includeendpoints: use minval and maxval as the end labels
        nearness: nearness of labels to data on a linear axis
        minlabels, maxlabels: number of labels allowed in BOUNDED mode
        fmt: printf style format for labels, or empty for automatic
        """

        if mode not in self.modes:
            raise ValueError('Unknown axis label mode %r' % mode)

        self.minval = minval
        self.maxval = maxval
        self.mode = mode
        self.includeendpoints = includeendpoints
        self.nearness = nearness
        self.minlabels = minlabels
        self.maxlabels = maxlabels
        self.fmt = fmt

        self.labelvals = None
        self.labeltext = None
        self.reversed = None

    @classmethod
    def fromSettings(cls, minval, maxval, settings):
        """Make from an AxisLabelSettings collection."""
        return cls(minval, maxval,
                   mode=settings.mode,
                   includeendpoints=settings.includeEndpoints,
                   nearness=settings.nearness,
                   minlabels=settings.minLabels,
                   maxlabels=settings.maxLabels,
                   fmt=settings.format)

    def getLabels(self):
        """Calculate the label values and text, returning the values."""

        if self.mode == LOG:
            vals = findLogLabels(self.minval, self.maxval)
        elif self.mode == BOUNDED:
            vals = findNLabels(self.minval, self.maxval,
                               self.includeendpoints,
                               self.minlabels, self.maxlabels)
        else:
            vals = findLabels(self.minval, self.maxval,
                              self.includeendpoints, self.nearness)

        if self.fmt:
            text = utils.formatLabelsWith(vals, self.fmt)
        else:
            text = utils.formatLabels(vals)

        self.labelvals = vals
        self.labeltext = text
        self.reversed = self.minval > self.maxval
        return vals
