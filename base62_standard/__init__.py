from __future__ import annotations
import platform


class Version:
    version_name = "1.0.0"

    @staticmethod
    def version_string():
        return "base62-standard " + Version.version_name

    @staticmethod
    def system_info_string():
        return Version.version_string() + \
               "; Python " + platform.python_version() + \
               "; " + platform.system()
