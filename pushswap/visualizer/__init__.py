"""Running an external sorter and splitting its input and output."""