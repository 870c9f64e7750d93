# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Collection of exception classes"""


class NonConformance(AssertionError):
    """A singleton type does not satisfy the singleton contract

    Attributes
    ----------
    cls : type
        The offending type
    check : str
        Name of the failed check
    report : pandas.DataFrame or None
        Full verification report, if available
    """
    kind = "unknown"

    def __init__(self, cls, check, text, report=None):
        """Parameters
        ----------
        cls : type
            Set the :py:attr:`cls` attribute.
        check : str
            Set the :py:attr:`check` attribute.
        text : str
            What to display when converting the exception to a str
        report : pandas.DataFrame or None, optional
            Set the :py:attr:`report` attribute.
        """
        super().__init__(text)
        self.cls = cls
        self.check = check
        self.report = report


class StructuralNonConformance(NonConformance):
    """Wrong fields, visibility, finality, constructors or methods"""
    kind = "structural"


class BehavioralNonConformance(NonConformance):
    """Wrong instance identity, initialization or string conversion"""
    kind = "behavioral"
