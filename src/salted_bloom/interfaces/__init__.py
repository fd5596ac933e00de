"""Protocol interfaces for salted_bloom components."""
