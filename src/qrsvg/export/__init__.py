"""qrsvg の書き出し（SVG）。"""
