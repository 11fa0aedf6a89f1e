"""
Building blocks of the network: neurons and synapses.
"""
