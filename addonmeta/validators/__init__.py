"""The built-in add-on metadata validators, one module per code."""