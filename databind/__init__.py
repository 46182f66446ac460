"""databind — pure state kernel for the prop-to-dataset binding panel."""
