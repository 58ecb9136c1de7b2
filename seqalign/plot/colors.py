"""
Color constants for seqalign plotting.
"""

# Nucleotide colors for axis labels; other residues are drawn in black
NT_COLOR = {
    "A": "#74AB86",  # soft green
    "C": "#6E93C0",  # soft blue
    "G": "#C19A5A",  # ochre
    "T": "#C26F6F",  # soft red
    "U": "#C26F6F",
}

# Traceback path markers
PATH_COLOR = "#00ff2f"

HEATMAP_COLORMAPS = {
    "default": "Reds",
    "diverging": "RdBu_r",
}
