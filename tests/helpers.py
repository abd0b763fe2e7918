import contextlib
import os
import shutil
import tempfile

from . import mock

class ExceptionWrapperTestHelper(object):
    @contextlib.contextmanager
    def assertRaisesWrapped(self, wrapped_class, wrapper_class, *wrapper_args):
        with self.assertRaises(wrapper_class) as exc_check:
            yield exc_check
        if wrapper_args:
            self.assertEqual(exc_check.exception.args, wrapper_args)
        self.assertIsInstance(exc_check.exception.__cause__, wrapped_class)


class ExitTestHelper(object):
    @contextlib.contextmanager
    def assertExits(self, *exit_codes):
        with self.assertRaises(SystemExit) as exc_check:
            yield exc_check
        if exit_codes:
            self.assertIn(exc_check.exception.code, exit_codes)


class TreeTestHelper(object):
    def make_tree(self, *paths):
        """Create paths under a new temporary root and return the root.

        Paths ending with '/' become directories, others become empty files.
        """
        root = tempfile.mkdtemp(prefix='rrtest')
        self.addCleanup(shutil.rmtree, root)
        for path in paths:
            full_path = os.path.join(root, path)
            if path.endswith('/'):
                os.makedirs(full_path, exist_ok=True)
            else:
                os.makedirs(os.path.dirname(full_path), exist_ok=True)
                open(full_path, 'w').close()
        return root

    def relative(self, root, paths):
        return [os.path.relpath(path, root) for path in paths]


class NoopMock(mock.NonCallableMock):
    def __init__(self, *args, **kwargs):
        kwargs.setdefault('spec_set', object)
        return super(NoopMock, self).__init__(*args, **kwargs)
