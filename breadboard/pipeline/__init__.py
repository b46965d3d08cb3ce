"""Pipeline stages — design, topology, connectivity, placer, router, layout.

Each stage consumes plain records produced by the previous one.  The
stages in order:

  design        — circuit document: components, nets, board config
  topology      — hole coordinates ↔ drawing space, row/column labels
  connectivity  — electrical tie groups, short/open primitives
  placer        — assign every component a free span of holes
  router        — L-shaped wire paths and colours per net
  layout        — run placer then router over a whole circuit
"""
