# utils/i18n.py

"""Internationalization support."""
import locale
from typing import Dict

class Translator:
    """Simple translation system for multilingual support."""

    def __init__(self):
        self.current_lang = 'en'
        self.translations: Dict[str, Dict[str, str]] = {
            'en': {
                # Shell
                'prompt': '{0}> ',
                'unknown_command': "Unknown command '{0}'. Type 'help' for a list of commands.",
                'exit_message': 'Exiting finder shell. Goodbye!',
                'interrupted': 'Shell interrupted by user.',
                'hidden_shown': 'Hidden entries are now shown.',
                'hidden_hidden': 'Hidden entries are now hidden.',
                'help_text': (
                    'Available commands:\n'
                    '  find [options]   Recursively search for entries matching a pattern\n'
                    '                   (run "find -help" for all options)\n'
                    '  cd <directory>   Change directory (".." for parent, absolute paths allowed)\n'
                    '  ls               List the current directory\n'
                    '  show             Show hidden entries\n'
                    '  hide             Hide hidden entries\n'
                    '  help             Show this help\n'
                    '  exit             Leave the shell'
                ),

                # Navigation
                'cd_usage': 'Usage: cd <directory>',
                'cd_into_file': "Cannot cd into a file: '{0}'",
                'cd_not_found': "No such directory: '{0}'",
                'cd_failed': "Cannot change directory to '{0}': {1}",
                'ls_failed': "Cannot list '{0}': {1}",

                # Find
                'find_description': 'Recursively search directories for entries whose path matches a pattern.',
                'find_dir_help': 'Directory to search (repeatable, default: current directory)',
                'find_match_help': 'Regex matched against the full path (repeatable, default: match all)',
                'find_output_help': 'Write results to this file instead of the screen',
                'find_size_help': 'Minimum file size (e.g. 100, 5KB, 1.5MB)',
                'find_all_help': 'Also report directories and other non-file entries',
                'find_level_help': 'Maximum number of directory levels to descend',
                'find_type_help': 'Only files with this extension (e.g. txt)',
                'find_perms_help': 'Permission descriptor (e.g. 755 or rwxr-xr-x)',
                'find_perm_mode_help': 'How permissions are compared: exact or at-least',
                'find_char_help': 'Only entries whose name contains this character',
                'find_ignore_case_help': 'Match patterns case-insensitively',
                'find_verbose_help': 'Print search criteria and a summary',
                'find_help_help': 'Show this help message',
                'find_error': 'find: {0}',
                'invalid_regex': 'Invalid regex pattern: {0}',
                'invalid_size': 'Invalid size format: {0}',
                'invalid_perms': 'Invalid permission descriptor: {0}',
                'invalid_depth': 'Depth must be a non-negative integer: {0}',
                'invalid_char': 'Expected a single character: {0}',
                'search_error': "Cannot read '{0}': {1}",
                'not_a_directory': 'Not a directory',
                'output_failed': "Cannot open output file '{0}': {1}",
                'scanning': 'Scanning',
                'results_written': '{0} result(s) written to {1}',
            },
            'de': {
                # Shell
                'prompt': '{0}> ',
                'unknown_command': "Unbekannter Befehl '{0}'. Mit 'help' werden alle Befehle angezeigt.",
                'exit_message': 'Finder-Shell wird beendet. Auf Wiedersehen!',
                'interrupted': 'Shell vom Benutzer unterbrochen.',
                'hidden_shown': 'Versteckte Einträge werden jetzt angezeigt.',
                'hidden_hidden': 'Versteckte Einträge werden jetzt ausgeblendet.',
                'help_text': (
                    'Verfügbare Befehle:\n'
                    '  find [Optionen]  Rekursiv nach Einträgen suchen, die einem Muster entsprechen\n'
                    '                   ("find -help" zeigt alle Optionen)\n'
                    '  cd <Ordner>      Ordner wechseln (".." für übergeordneten Ordner, absolute Pfade erlaubt)\n'
                    '  ls               Aktuellen Ordner auflisten\n'
                    '  show             Versteckte Einträge anzeigen\n'
                    '  hide             Versteckte Einträge ausblenden\n'
                    '  help             Diese Hilfe anzeigen\n'
                    '  exit             Shell verlassen'
                ),

                # Navigation
                'cd_usage': 'Verwendung: cd <Ordner>',
                'cd_into_file': "Kann nicht in eine Datei wechseln: '{0}'",
                'cd_not_found': "Ordner nicht gefunden: '{0}'",
                'cd_failed': "Kann nicht nach '{0}' wechseln: {1}",
                'ls_failed': "Kann '{0}' nicht auflisten: {1}",

                # Find
                'find_description': 'Ordner rekursiv nach Einträgen durchsuchen, deren Pfad einem Muster entspricht.',
                'find_dir_help': 'Zu durchsuchender Ordner (mehrfach möglich, Standard: aktueller Ordner)',
                'find_match_help': 'Regex für den vollständigen Pfad (mehrfach möglich, Standard: alles)',
                'find_output_help': 'Ergebnisse in diese Datei statt auf den Bildschirm schreiben',
                'find_size_help': 'Minimale Dateigröße (z.B. 100, 5KB, 1.5MB)',
                'find_all_help': 'Auch Ordner und andere Einträge ausgeben',
                'find_level_help': 'Maximale Anzahl zu durchsuchender Ordnerebenen',
                'find_type_help': 'Nur Dateien mit dieser Endung (z.B. txt)',
                'find_perms_help': 'Berechtigungen (z.B. 755 oder rwxr-xr-x)',
                'find_perm_mode_help': 'Vergleich der Berechtigungen: exact oder at-least',
                'find_char_help': 'Nur Einträge, deren Name dieses Zeichen enthält',
                'find_ignore_case_help': 'Groß-/Kleinschreibung ignorieren',
                'find_verbose_help': 'Suchkriterien und Zusammenfassung ausgeben',
                'find_help_help': 'Diese Hilfe anzeigen',
                'find_error': 'find: {0}',
                'invalid_regex': 'Ungültiges Regex-Muster: {0}',
                'invalid_size': 'Ungültiges Größenformat: {0}',
                'invalid_perms': 'Ungültige Berechtigungsangabe: {0}',
                'invalid_depth': 'Tiefe muss eine nicht-negative ganze Zahl sein: {0}',
                'invalid_char': 'Genau ein Zeichen erwartet: {0}',
                'search_error': "Kann '{0}' nicht lesen: {1}",
                'not_a_directory': 'Kein Ordner',
                'output_failed': "Kann Ausgabedatei '{0}' nicht öffnen: {1}",
                'scanning': 'Durchsuche',
                'results_written': '{0} Ergebnis(se) in {1} geschrieben',
            }
        }

        # Auto-detect system language
        try:
            system_lang = locale.getlocale()[0]
            if system_lang and system_lang.startswith('de'):
                self.current_lang = 'de'
        except ValueError:
            pass

    def set_language(self, lang_code: str):
        """Set the current language."""
        if lang_code in self.translations:
            self.current_lang = lang_code

    def get(self, key: str, *args) -> str:
        """Get translated string, with optional formatting."""
        text = self.translations[self.current_lang].get(key, key)
        if args:
            try:
                return text.format(*args)
            except (IndexError, KeyError):
                return text
        return text

# Global translator instance
translator = Translator()
