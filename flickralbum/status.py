"""User-facing status output: messages, warnings, errors and verbose notes on stderr, mirrored
to an optional log file."""
import logging
import sys

from .general import AlbumError


__all__ = ['Messenger']
STATUS_LOGGER_NAME = 'flickralbum.status'
WARNING_MARK = '*** WARNING ***: '
ERROR_MARK = '*** ERROR ***: '


class AppendFileHandler(logging.Handler):
	"""Appends each record to a file. The file is opened and closed for every record, so no
	handle stays open between writes.
	"""
	terminator = '\n'

	def __init__(self, filename, level=logging.NOTSET):
		super().__init__(level)
		self.filename = filename

	def emit(self, record):
		msg = self.format(record)
		try:
			with open(self.filename, 'a', encoding='utf-8') as f:
				f.write(msg + self.terminator)
		except OSError as e:
			# Losing the log is fatal, don't let logging swallow it.
			raise AlbumError('{}: {}'.format(self.filename, e.strerror or e))


class Messenger():
	"""Prints status text to the error stream and mirrors it to a log file, if one is set.

	Args:
		stream: Output stream. Defaults to sys.stderr.
		prefix: Text placed before every message, warning and error.
		log_file: Path of a file that every line is appended to. (Optional)
		verbose: Print verbose() text too, not only log it.
	"""
	def __init__(self, stream=None, prefix='', log_file=None, verbose=False):
		self.prefix = prefix
		self.is_verbose = False

		# Unregistered, so every Messenger has its own handlers and nothing propagates.
		self.logger = logging.Logger(STATUS_LOGGER_NAME, logging.DEBUG)

		formatter = logging.Formatter('%(message)s')
		self.stream_handler = logging.StreamHandler(stream=sys.stderr if stream is None else stream)
		self.stream_handler.setFormatter(formatter)
		self.logger.addHandler(self.stream_handler)

		self.file_handler = None

		self.setVerbose(verbose)
		if log_file is not None:
			self.setLog(log_file)

	def _emit(self, level, parts):
		self.logger.log(level, ''.join(str(p) for p in parts))

	def message(self, *text):
		self._emit(logging.INFO, (self.prefix,) + text)

	def warning(self, *text):
		self._emit(logging.WARNING, (WARNING_MARK, self.prefix) + text)

	def error(self, *text):
		self._emit(logging.ERROR, (ERROR_MARK, self.prefix) + text)

	def verbose(self, *text):
		"""Goes to the log file always, to the stream only in verbose mode."""
		self._emit(logging.DEBUG, text)

	def log(self, *text):
		"""Appends text to the log file only. Does nothing if no log file is set."""
		if self.file_handler is None:
			return
		record = self.logger.makeRecord(self.logger.name, logging.INFO, '', 0,
				''.join(str(p) for p in text), None, None)
		self.file_handler.handle(record)

	def setMessagePrefix(self, prefix):
		if prefix is None:
			raise ValueError('Invalid argument')
		self.prefix = prefix

	def setLog(self, log_file):
		if log_file is None:
			raise ValueError('Invalid argument')
		if self.file_handler is not None:
			self.logger.removeHandler(self.file_handler)
		self.file_handler = AppendFileHandler(log_file, level=logging.DEBUG)
		self.file_handler.setFormatter(logging.Formatter('%(message)s'))
		self.logger.addHandler(self.file_handler)

	def setVerbose(self, flag=None):
		"""Verbose is off only when flag is given and is numerically zero. Numeric strings, eg.
		from the command line, are accepted.
		"""
		self.is_verbose = flag is None or float(flag) != 0
		self.stream_handler.setLevel(logging.DEBUG if self.is_verbose else logging.INFO)

	def exitWith(self, code, *text):
		self.message(*text)
		sys.exit(code)

	def errorExit(self, code, *text):
		self.error(*text)
		sys.exit(code)
