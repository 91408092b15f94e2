__title__ = "sysexit"
__description__ = "Classify process exit statuses into sysexits, shell and signal codes"
__version__ = "1.0.0"
__license__ = "GPLv3"
