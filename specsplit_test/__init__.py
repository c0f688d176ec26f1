"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""
