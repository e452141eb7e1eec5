"""
Houses the tests for the REST api layer of the program.

The tests are set up primarily to assert that
the formatting of the responses remains stable,
and that the system throws the expected errors
when interacted with incorrectly.
"""
