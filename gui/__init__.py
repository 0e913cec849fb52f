"""
DesignOptions - GUI
PySide6 Host-Integration für das Design-Options-Tool
"""
