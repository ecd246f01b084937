"""Tests for the multicontainers package

The behaviour of multicontainers is specified via tests. Each module
has an associated test module and each class an associated TestCase.
Test cases of interfaces are written once and bound to the class under
test through a class attribute. To test another implementation,
derive from the interface test case and overload that attribute, e.g.

>>> class TestTreeMultiSet(TestMultiSet):
...     MultiSet = TreeMultiSet

would run the complete MultiSet specification against TreeMultiSet.
Abstract base classes are bound with AbstractTestCase, which skips
the tests for as long as the bound class is abstract.
"""
