#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.


class BaseFactory(object):
    """Registry of named plugin classes sharing a common base class.

    Attributes:
        base_class (class): base class that registered classes must subclass
    """

    def __init__(self, base_class):
        self.base_class = base_class
        self.classes = {}

    @property
    def registered_names(self):
        """list of str: names registered with the factory, in order."""
        return list(self.classes.keys())

    def create(self, name, *args, **kwargs):
        """Instantiate the class registered under name.

        Args:
            name (str): name the class was registered with
            args, kwargs: passed through to the constructor
        """
        if name not in self.classes:
            raise KeyError(
                'No {} named "{}". Did you forget to register() it?'.format(
                    self.base_class.__name__, name
                )
            )
        return self.classes[name](*args, **kwargs)

    def register(self, name, subclass):
        """Registers a class with the factory.

        Args:
            name (str): name of the class
            subclass (class): concrete subclass of base_class
        """
        assert issubclass(subclass, self.base_class)
        self.classes[name] = subclass
