"""Galaxy generation on integer grid points within a ball or disk."""