"""
Command-line client for Yandex Dictionary.

Looks up a word or phrase for a translation direction and prints the
dictionary entry.  See https://yandex.com/dev/dictionary.
"""
