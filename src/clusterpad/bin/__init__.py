"""clusterpad Command Line Interface.

Main Components
---------------
cli.py : Command-line interface which clusters a point file and reports,
         or draws, the resulting labels

Usage Examples
--------------
Main CLI usage::

    clusterpad -s points.csv --eps 30 --min-pts 4
    clusterpad -c config.yaml --set dbscan.eps=30 -o labels.html
"""
